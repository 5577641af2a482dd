"""Default tool catalog — every built-in tool wired to its adapter."""

from thinkspace.knowledge.domain.search import NoteSearch
from thinkspace.knowledge.domain.store import KnowledgeStore
from thinkspace.tools.application.boundary import guard
from thinkspace.tools.application.create_mindmap import CreateMindmapAdapter
from thinkspace.tools.application.create_project import CreateProjectAdapter
from thinkspace.tools.application.create_timeline import CreateTimelineAdapter
from thinkspace.tools.application.draft_note import DraftNoteAdapter
from thinkspace.tools.application.link_notes import LinkNotesAdapter
from thinkspace.tools.application.query_database import QueryDatabaseAdapter
from thinkspace.tools.application.search_notes import SearchNotesAdapter
from thinkspace.tools.domain.descriptor import ToolDescriptor, ToolExecute
from thinkspace.tools.domain.inputs import (
    CreateMindmapInput,
    CreateProjectInput,
    CreateTimelineInput,
    DraftNoteInput,
    LinkNotesInput,
    QueryDatabaseInput,
    SearchNotesInput,
    ToolInput,
)
from thinkspace.tools.domain.observer import ToolObserver
from thinkspace.tools.infrastructure.registry import ToolRegistry


def create_default_registry(
    store: KnowledgeStore, search: NoteSearch, observer: ToolObserver
) -> ToolRegistry:
    """Build a ToolRegistry holding the seven built-in tools, guarded at the adapter boundary."""
    registry = ToolRegistry(observer=observer)

    def add(
        name: str,
        description: str,
        input_model: type[ToolInput],
        action: str,
        execute: ToolExecute,
    ) -> None:
        registry.register(
            ToolDescriptor(
                name=name,
                description=description,
                input_model=input_model,
                execute=guard(
                    tool_name=name, action=action, execute=execute, observer=observer
                ),
            )
        )

    add(
        "search_notes",
        "Search through user notes, optionally within one PARA category",
        SearchNotesInput,
        "search notes",
        SearchNotesAdapter(search=search).execute,
    )
    add(
        "create_project",
        "Create a new project with goals and tasks",
        CreateProjectInput,
        "create project",
        CreateProjectAdapter(store=store, observer=observer).execute,
    )
    add(
        "draft_note",
        "Draft a new note in a PARA category, optionally linked to existing notes",
        DraftNoteInput,
        "draft note",
        DraftNoteAdapter(store=store, observer=observer).execute,
    )
    add(
        "link_notes",
        "Create a bidirectional link between two notes",
        LinkNotesInput,
        "create link",
        LinkNotesAdapter(store=store).execute,
    )
    add(
        "create_timeline",
        "Generate a visual timeline for a project",
        CreateTimelineInput,
        "create timeline",
        CreateTimelineAdapter(store=store).execute,
    )
    add(
        "create_mindmap",
        "Generate a mind map for an area or concept",
        CreateMindmapInput,
        "create mind map",
        CreateMindmapAdapter(store=store).execute,
    )
    add(
        "query_database",
        "Query the user's projects, tasks and notes for analytics and insights",
        QueryDatabaseInput,
        "execute query",
        QueryDatabaseAdapter(store=store).execute,
    )
    return registry
