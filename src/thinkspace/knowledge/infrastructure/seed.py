"""YAML seed loader — populates an InMemoryKnowledgeStore for local development.

Expected layout::

    users:
      user-1:
        areas:
          - title: Health
        projects:
          - title: Launch site
            description: Ship the marketing site
            goals: [launch]
            tasks:
              - {title: design, status: done}
        notes:
          - {title: Pricing ideas, content: "...", tags: [resource]}
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from thinkspace.knowledge.domain.records import TaskStatus
from thinkspace.knowledge.infrastructure.errors import SeedLoadError
from thinkspace.knowledge.infrastructure.memory_store import InMemoryKnowledgeStore


class _SeedTask(BaseModel, frozen=True):
    title: str
    status: TaskStatus = TaskStatus.TODO
    due_date: str | None = None


class _SeedProject(BaseModel, frozen=True):
    title: str
    description: str = ""
    goals: list[str] = Field(default_factory=list)
    tasks: list[_SeedTask] = Field(default_factory=list)


class _SeedNote(BaseModel, frozen=True):
    title: str
    content: str
    tags: list[str] = Field(default_factory=list)


class _SeedArea(BaseModel, frozen=True):
    title: str


class _SeedUser(BaseModel, frozen=True):
    areas: list[_SeedArea] = Field(default_factory=list)
    projects: list[_SeedProject] = Field(default_factory=list)
    notes: list[_SeedNote] = Field(default_factory=list)


class _Seed(BaseModel, frozen=True):
    users: dict[str, _SeedUser] = Field(default_factory=dict)


def _parse(path: Path) -> _Seed:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw: Any = yaml.safe_load(fh) or {}
    except FileNotFoundError as exc:
        raise SeedLoadError(path=path, reason="file not found") from exc
    except yaml.YAMLError as exc:
        raise SeedLoadError(path=path, reason=str(exc)) from exc

    try:
        return _Seed.model_validate(raw)
    except ValidationError as exc:
        raise SeedLoadError(path=path, reason=str(exc)) from exc


async def seed_store(store: InMemoryKnowledgeStore, path: Path) -> None:
    """Create every record described in the seed file at *path*.

    Raises:
        SeedLoadError: if the file is missing, is not YAML, or has the wrong shape.
    """
    seed = _parse(path=path)
    for owner_id, user in seed.users.items():
        for area in user.areas:
            await store.create_area(owner_id=owner_id, title=area.title)
        for project in user.projects:
            created = await store.create_project(
                owner_id=owner_id,
                title=project.title,
                description=project.description,
                goals=project.goals,
                start_date=None,
                due_date=None,
                metadata={"goals": project.goals},
            )
            for task in project.tasks:
                await store.create_task(
                    owner_id=owner_id,
                    project_id=created.id,
                    title=task.title,
                    due_date=task.due_date,
                    status=task.status,
                )
        for note in user.notes:
            await store.create_note(
                owner_id=owner_id,
                title=note.title,
                content=note.content,
                tags=note.tags,
                metadata={},
            )
