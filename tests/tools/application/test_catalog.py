"""End-to-end tests for the default tool catalog through the registry."""

from thinkspace.knowledge.infrastructure.keyword_search import KeywordNoteSearch
from thinkspace.knowledge.infrastructure.memory_store import InMemoryKnowledgeStore
from thinkspace.tools.application.catalog import create_default_registry
from thinkspace.tools.domain.result import ToolFailure, ToolSuccess
from thinkspace.tools.infrastructure.registry import ToolRegistry
from tests.tools.fake_observer import FakeToolObserver
from tests.tools.fake_store import FlakyKnowledgeStore


def _make_registry(
    store: InMemoryKnowledgeStore | None = None,
    observer: FakeToolObserver | None = None,
) -> ToolRegistry:
    store = store or InMemoryKnowledgeStore()
    return create_default_registry(
        store=store,
        search=KeywordNoteSearch(store=store),
        observer=observer or FakeToolObserver(),
    )


class TestDefaultRegistry:
    def test_registers_all_builtin_tools(self) -> None:
        registry = _make_registry()

        assert [d.name for d in registry.descriptors()] == [
            "search_notes",
            "create_project",
            "draft_note",
            "link_notes",
            "create_timeline",
            "create_mindmap",
            "query_database",
        ]

    def test_every_tool_advertises_an_object_schema(self) -> None:
        for descriptor in _make_registry().descriptors():
            assert descriptor.input_schema["type"] == "object"
            assert descriptor.description

    async def test_validated_input_runs_through_adapter(self) -> None:
        registry = _make_registry()

        tool_input = registry.validate(
            "create_project",
            {
                "title": "Launch",
                "description": "Ship it",
                "goals": ["v1"],
                "tasks": [{"title": "Write copy"}, {"title": "Deploy"}],
            },
        )
        result = await registry.resolve("create_project").execute("user-1", tool_input)

        assert isinstance(result, ToolSuccess)
        assert result.payload["tasksCount"] == 2

    async def test_cross_owner_link_fails_without_raising(self) -> None:
        store = InMemoryKnowledgeStore()
        mine = await store.create_note(
            owner_id="user-1", title="Mine", content="", tags=[], metadata={}
        )
        theirs = await store.create_note(
            owner_id="user-2", title="Theirs", content="", tags=[], metadata={}
        )
        observer = FakeToolObserver()
        registry = _make_registry(store=store, observer=observer)

        tool_input = registry.validate(
            "link_notes", {"sourceNoteId": mine.id, "targetNoteId": theirs.id}
        )
        result = await registry.resolve("link_notes").execute("user-1", tool_input)

        assert result == ToolFailure(error="One or both notes not found or unauthorized")
        assert store.connections == {}
        assert observer.denied[0].tool_name == "link_notes"

    async def test_store_crash_becomes_generic_failure(self) -> None:
        store = FlakyKnowledgeStore(failing=frozenset({"create_project"}))
        registry = _make_registry(store=store)

        tool_input = registry.validate(
            "create_project",
            {"title": "T", "description": "", "goals": [], "tasks": []},
        )
        result = await registry.resolve("create_project").execute("user-1", tool_input)

        assert result == ToolFailure(error="Failed to create project")
