"""KnowledgeStore Protocol — structural interface for the persistent knowledge store.

Lookups by id are not owner-filtered: callers compare ``owner_id`` themselves so
that absence and foreign ownership can be reported identically. Aggregate reads
(counts, listings) are always scoped to one owner.
"""

from typing import Any, Protocol

from thinkspace.knowledge.domain.records import (
    Area,
    GraphSnapshot,
    Note,
    NoteConnection,
    Project,
    Task,
    TaskStatus,
)


class KnowledgeStore(Protocol):
    async def create_project(
        self,
        owner_id: str,
        title: str,
        description: str,
        goals: list[str],
        start_date: str | None,
        due_date: str | None,
        metadata: dict[str, Any],
    ) -> Project: ...

    async def get_project(self, project_id: str) -> Project | None: ...

    async def update_project_metadata(
        self, project_id: str, metadata: dict[str, Any]
    ) -> Project: ...

    async def count_projects(self, owner_id: str) -> int: ...

    async def recent_projects(self, owner_id: str, limit: int) -> list[Project]: ...

    async def create_task(
        self,
        owner_id: str,
        project_id: str,
        title: str,
        due_date: str | None,
        status: TaskStatus = TaskStatus.TODO,
    ) -> Task: ...

    async def task_status_counts(self, owner_id: str) -> dict[TaskStatus, int]: ...

    async def create_note(
        self,
        owner_id: str,
        title: str,
        content: str,
        tags: list[str],
        metadata: dict[str, Any],
    ) -> Note: ...

    async def get_note(self, note_id: str) -> Note | None: ...

    async def list_notes(self, owner_id: str) -> list[Note]: ...

    async def count_notes(self, owner_id: str) -> int: ...

    async def create_connection(
        self,
        owner_id: str,
        source_note_id: str,
        target_note_id: str,
        link_type: str,
        bidirectional: bool,
    ) -> NoteConnection: ...

    async def list_connections(self, owner_id: str) -> list[NoteConnection]: ...

    async def get_area(self, area_id: str) -> Area | None: ...

    async def create_snapshot(
        self, owner_id: str, title: str, description: str, data: dict[str, Any]
    ) -> GraphSnapshot: ...
