"""Tool input models — the strictly-typed argument schema of every tool.

Field names face the language model in camelCase; snake_case names are accepted
as well so that Python callers can construct inputs directly. Unknown fields
are rejected.
"""

from enum import StrEnum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from thinkspace.knowledge.domain.category import ParaCategory


class LinkType(StrEnum):
    RELATED = "related"
    SUPPORTS = "supports"
    CONTRADICTS = "contradicts"
    EXTENDS = "extends"


class Visualization(StrEnum):
    TABLE = "table"
    CHART = "chart"
    GRAPH = "graph"


class ToolInput(BaseModel):
    """Base for all tool inputs."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SearchNotesInput(ToolInput):
    query: str = Field(min_length=1, description="Search query")
    limit: int = Field(default=5, ge=1, description="Number of results to return")
    category: ParaCategory | None = Field(
        default=None, description="Restrict results to one PARA category"
    )


class TaskDraft(ToolInput):
    title: str = Field(min_length=1)
    due_date: str | None = None


class CreateProjectInput(ToolInput):
    title: str = Field(min_length=1, description="Project title")
    description: str = Field(description="Project description")
    goals: list[str] = Field(description="Project goals")
    tasks: list[TaskDraft] = Field(description="Initial tasks, in order")
    start_date: str | None = None
    due_date: str | None = None


class DraftNoteInput(ToolInput):
    title: str = Field(min_length=1, description="Note title")
    content: str = Field(description="Note content")
    category: ParaCategory = Field(description="PARA category")
    tags: list[str] = Field(default_factory=list, description="Tags for the note")
    related_note_ids: list[str] = Field(
        default_factory=list, description="Existing notes this note relates to"
    )


class LinkNotesInput(ToolInput):
    source_note_id: str = Field(
        min_length=1,
        validation_alias=AliasChoices("sourceNoteId", "sourceId", "source_note_id"),
        serialization_alias="sourceNoteId",
        description="Source note ID",
    )
    target_note_id: str = Field(
        min_length=1,
        validation_alias=AliasChoices("targetNoteId", "targetId", "target_note_id"),
        serialization_alias="targetNoteId",
        description="Target note ID",
    )
    link_type: LinkType = Field(default=LinkType.RELATED, description="Type of link")


class TimelineEventInput(ToolInput):
    title: str = Field(min_length=1)
    date: str = Field(min_length=1)
    description: str | None = None
    milestone: bool = False


class CreateTimelineInput(ToolInput):
    project_id: str = Field(min_length=1, description="Project ID")
    events: list[TimelineEventInput] = Field(description="Timeline events")


class MindmapNodeInput(ToolInput):
    id: str = Field(min_length=1)
    label: str = Field(min_length=1)
    parent_id: str | None = None
    color: str | None = None


class CreateMindmapInput(ToolInput):
    central_topic: str = Field(min_length=1, description="Central topic")
    nodes: list[MindmapNodeInput] = Field(description="Mind map nodes")
    area_id: str | None = Field(default=None, description="Related area ID")


class QueryDatabaseInput(ToolInput):
    query: str = Field(min_length=1, description="Natural language query")
    visualization: Visualization = Field(
        default=Visualization.TABLE, description="Visualization type"
    )
