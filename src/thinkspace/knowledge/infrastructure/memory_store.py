"""InMemoryKnowledgeStore — process-local KnowledgeStore used by the dev server and tests."""

import uuid
from collections import Counter
from datetime import UTC, datetime
from typing import Any

from thinkspace.knowledge.domain.records import (
    Area,
    GraphSnapshot,
    Note,
    NoteConnection,
    Project,
    Task,
    TaskStatus,
)
from thinkspace.knowledge.infrastructure.errors import RecordNotFoundError


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(UTC)


class InMemoryKnowledgeStore:
    """Satisfies the KnowledgeStore protocol with plain dicts keyed by record id.

    Every write is a single dict assignment, so concurrent turns on one event
    loop never observe a half-written record. Nothing survives a restart.
    """

    def __init__(self) -> None:
        self.projects: dict[str, Project] = {}
        self.tasks: dict[str, Task] = {}
        self.notes: dict[str, Note] = {}
        self.connections: dict[str, NoteConnection] = {}
        self.areas: dict[str, Area] = {}
        self.snapshots: dict[str, GraphSnapshot] = {}

    # ------------------------------------------------------------------
    # Projects and tasks
    # ------------------------------------------------------------------

    async def create_project(
        self,
        owner_id: str,
        title: str,
        description: str,
        goals: list[str],
        start_date: str | None,
        due_date: str | None,
        metadata: dict[str, Any],
    ) -> Project:
        project = Project(
            id=_new_id(),
            owner_id=owner_id,
            title=title,
            description=description,
            goals=list(goals),
            start_date=start_date,
            due_date=due_date,
            metadata=dict(metadata),
            created_at=_now(),
        )
        self.projects[project.id] = project
        return project

    async def get_project(self, project_id: str) -> Project | None:
        return self.projects.get(project_id)

    async def update_project_metadata(
        self, project_id: str, metadata: dict[str, Any]
    ) -> Project:
        """Replace the project's metadata wholesale.

        Raises:
            RecordNotFoundError: if no project has this id.
        """
        existing = self.projects.get(project_id)
        if existing is None:
            raise RecordNotFoundError(kind="project", record_id=project_id)
        updated = existing.model_copy(update={"metadata": dict(metadata)})
        self.projects[project_id] = updated
        return updated

    async def count_projects(self, owner_id: str) -> int:
        return sum(1 for p in self.projects.values() if p.owner_id == owner_id)

    async def recent_projects(self, owner_id: str, limit: int) -> list[Project]:
        # Newest insertion first so that equal timestamps keep creation order.
        owned = [p for p in reversed(self.projects.values()) if p.owner_id == owner_id]
        owned.sort(key=lambda p: p.created_at, reverse=True)
        return owned[:limit]

    async def create_task(
        self,
        owner_id: str,
        project_id: str,
        title: str,
        due_date: str | None,
        status: TaskStatus = TaskStatus.TODO,
    ) -> Task:
        if project_id not in self.projects:
            raise RecordNotFoundError(kind="project", record_id=project_id)
        task = Task(
            id=_new_id(),
            owner_id=owner_id,
            project_id=project_id,
            title=title,
            status=status,
            due_date=due_date,
            created_at=_now(),
        )
        self.tasks[task.id] = task
        return task

    async def task_status_counts(self, owner_id: str) -> dict[TaskStatus, int]:
        counts = Counter(t.status for t in self.tasks.values() if t.owner_id == owner_id)
        return {status: counts[status] for status in TaskStatus if counts[status]}

    # ------------------------------------------------------------------
    # Notes and connections
    # ------------------------------------------------------------------

    async def create_note(
        self,
        owner_id: str,
        title: str,
        content: str,
        tags: list[str],
        metadata: dict[str, Any],
    ) -> Note:
        created = _now()
        note = Note(
            id=_new_id(),
            owner_id=owner_id,
            title=title,
            content=content,
            tags=list(tags),
            metadata=dict(metadata),
            created_at=created,
            updated_at=created,
        )
        self.notes[note.id] = note
        return note

    async def get_note(self, note_id: str) -> Note | None:
        return self.notes.get(note_id)

    async def list_notes(self, owner_id: str) -> list[Note]:
        return [n for n in self.notes.values() if n.owner_id == owner_id]

    async def count_notes(self, owner_id: str) -> int:
        return sum(1 for n in self.notes.values() if n.owner_id == owner_id)

    async def create_connection(
        self,
        owner_id: str,
        source_note_id: str,
        target_note_id: str,
        link_type: str,
        bidirectional: bool,
    ) -> NoteConnection:
        for note_id in (source_note_id, target_note_id):
            if note_id not in self.notes:
                raise RecordNotFoundError(kind="note", record_id=note_id)
        connection = NoteConnection(
            id=_new_id(),
            owner_id=owner_id,
            source_note_id=source_note_id,
            target_note_id=target_note_id,
            link_type=link_type,
            bidirectional=bidirectional,
        )
        self.connections[connection.id] = connection
        return connection

    async def list_connections(self, owner_id: str) -> list[NoteConnection]:
        return [c for c in self.connections.values() if c.owner_id == owner_id]

    # ------------------------------------------------------------------
    # Areas and snapshots
    # ------------------------------------------------------------------

    async def create_area(self, owner_id: str, title: str) -> Area:
        area = Area(id=_new_id(), owner_id=owner_id, title=title)
        self.areas[area.id] = area
        return area

    async def get_area(self, area_id: str) -> Area | None:
        return self.areas.get(area_id)

    async def create_snapshot(
        self, owner_id: str, title: str, description: str, data: dict[str, Any]
    ) -> GraphSnapshot:
        snapshot = GraphSnapshot(
            id=_new_id(),
            owner_id=owner_id,
            title=title,
            description=description,
            data=dict(data),
            created_at=_now(),
        )
        self.snapshots[snapshot.id] = snapshot
        return snapshot
