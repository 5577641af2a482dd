"""Knowledge record value objects — the owner-scoped rows of the knowledge store."""

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class TaskStatus(StrEnum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class Project(BaseModel, frozen=True):
    id: str
    owner_id: str
    title: str
    description: str
    goals: list[str] = Field(default_factory=list)
    start_date: str | None = None
    due_date: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime


class Task(BaseModel, frozen=True):
    id: str
    owner_id: str
    project_id: str
    title: str
    status: TaskStatus = TaskStatus.TODO
    due_date: str | None = None
    created_at: datetime


class Note(BaseModel, frozen=True):
    id: str
    owner_id: str
    title: str
    content: str
    tags: list[str] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime


class NoteConnection(BaseModel, frozen=True):
    """A link between two notes. link_type is stored upper-case (e.g. RELATED)."""

    id: str
    owner_id: str
    source_note_id: str
    target_note_id: str
    link_type: str
    bidirectional: bool = False
    created_by: str = "AI_SUGGESTED"


class Area(BaseModel, frozen=True):
    id: str
    owner_id: str
    title: str


class GraphSnapshot(BaseModel, frozen=True):
    id: str
    owner_id: str
    title: str
    description: str
    data: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
