"""Tests for the query_database adapter's keyword intents."""

import pytest

from thinkspace.knowledge.domain.records import TaskStatus
from thinkspace.knowledge.infrastructure.memory_store import InMemoryKnowledgeStore
from thinkspace.tools.application.query_database import (
    NOTE_COUNT_SQL,
    PROJECT_COUNT_SQL,
    RECENT_PROJECTS_SQL,
    TASK_STATUS_SQL,
    QueryDatabaseAdapter,
)
from thinkspace.tools.domain.inputs import QueryDatabaseInput, Visualization
from thinkspace.tools.domain.result import ToolFailure, ToolSuccess


async def _make_store() -> InMemoryKnowledgeStore:
    store = InMemoryKnowledgeStore()
    for owner_id, title in [("user-1", "Alpha"), ("user-1", "Beta"), ("user-2", "Gamma")]:
        project = await store.create_project(
            owner_id=owner_id,
            title=title,
            description="",
            goals=[],
            start_date=None,
            due_date=None,
            metadata={},
        )
        await store.create_task(
            owner_id=owner_id,
            project_id=project.id,
            title="t",
            due_date=None,
            status=TaskStatus.DONE,
        )
    await store.create_note(
        owner_id="user-1", title="n", content="", tags=[], metadata={}
    )
    return store


async def _run(query: str) -> ToolSuccess | ToolFailure:
    adapter = QueryDatabaseAdapter(store=await _make_store())
    return await adapter.execute("user-1", QueryDatabaseInput(query=query))


class TestQueryDatabaseAdapter:
    async def test_how_many_projects(self) -> None:
        result = await _run("How many projects do I have?")

        assert isinstance(result, ToolSuccess)
        assert result.payload["results"] == [{"count": 2}]
        assert result.payload["rowCount"] == 1
        assert result.payload["sql"] == PROJECT_COUNT_SQL
        assert result.payload["visualization"] == "table"
        assert result.payload["message"] == (
            "Query executed successfully. Found 1 results."
        )

    async def test_task_status(self) -> None:
        result = await _run("task status breakdown")

        assert result.payload["sql"] == TASK_STATUS_SQL
        assert result.payload["results"] == [{"status": "done", "count": 2}]

    async def test_note_count(self) -> None:
        result = await _run("total notes")

        assert result.payload["sql"] == NOTE_COUNT_SQL
        assert result.payload["results"] == [{"count": 1}]

    async def test_recent_projects_newest_first(self) -> None:
        result = await _run("recent work")

        assert result.payload["sql"] == RECENT_PROJECTS_SQL
        assert [r["title"] for r in result.payload["results"]] == ["Beta", "Alpha"]

    async def test_visualization_is_echoed(self) -> None:
        adapter = QueryDatabaseAdapter(store=await _make_store())

        result = await adapter.execute(
            "user-1",
            QueryDatabaseInput(query="count projects", visualization=Visualization.CHART),
        )

        assert result.payload["visualization"] == "chart"

    @pytest.mark.parametrize("query", ["weather tomorrow", "list projects"])
    async def test_unsupported_query_fails(self, query: str) -> None:
        result = await _run(query)

        assert isinstance(result, ToolFailure)
        assert result.error.startswith("Failed to execute query: not supported")
