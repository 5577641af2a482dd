"""Tests for tool input models — aliases, defaults, and strictness."""

import pytest
from pydantic import ValidationError

from thinkspace.knowledge.domain.category import ParaCategory
from thinkspace.tools.domain.inputs import (
    CreateMindmapInput,
    CreateProjectInput,
    LinkNotesInput,
    LinkType,
    QueryDatabaseInput,
    SearchNotesInput,
    Visualization,
)


class TestSearchNotesInput:
    """search_notes defaults limit to 5 and requires it to be positive."""

    def test_defaults(self) -> None:
        tool_input = SearchNotesInput.model_validate({"query": "marathon"})

        assert tool_input.limit == 5
        assert tool_input.category is None

    def test_category_enum(self) -> None:
        tool_input = SearchNotesInput.model_validate({"query": "q", "category": "area"})

        assert tool_input.category is ParaCategory.AREA

    def test_large_limit_accepted(self) -> None:
        tool_input = SearchNotesInput.model_validate({"query": "q", "limit": 100})

        assert tool_input.limit == 100

    @pytest.mark.parametrize("limit", [0, -1])
    def test_limit_out_of_range(self, limit: int) -> None:
        with pytest.raises(ValidationError):
            SearchNotesInput.model_validate({"query": "q", "limit": limit})

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SearchNotesInput.model_validate({"query": "q", "sort": "asc"})


class TestCamelAndSnakeNames:
    """Model-facing names are camelCase; snake_case is accepted too."""

    def test_camel_case(self) -> None:
        tool_input = CreateProjectInput.model_validate(
            {
                "title": "Site",
                "description": "d",
                "goals": [],
                "tasks": [{"title": "t", "dueDate": "2026-01-01"}],
                "startDate": "2025-12-01",
            }
        )

        assert tool_input.start_date == "2025-12-01"
        assert tool_input.tasks[0].due_date == "2026-01-01"

    def test_snake_case(self) -> None:
        tool_input = CreateMindmapInput.model_validate(
            {"central_topic": "Ideas", "nodes": [], "area_id": "a1"}
        )

        assert tool_input.central_topic == "Ideas"
        assert tool_input.area_id == "a1"

    def test_schema_uses_camel_case(self) -> None:
        schema = CreateMindmapInput.model_json_schema(by_alias=True)

        assert "centralTopic" in schema["properties"]
        assert schema["required"] == ["centralTopic", "nodes"]


class TestLinkNotesInput:
    """link_notes accepts sourceNoteId/targetNoteId or the short sourceId/targetId."""

    def test_long_names(self) -> None:
        tool_input = LinkNotesInput.model_validate(
            {"sourceNoteId": "a", "targetNoteId": "b", "linkType": "supports"}
        )

        assert (tool_input.source_note_id, tool_input.target_note_id) == ("a", "b")
        assert tool_input.link_type is LinkType.SUPPORTS

    def test_short_names_default_link_type(self) -> None:
        tool_input = LinkNotesInput.model_validate({"sourceId": "a", "targetId": "b"})

        assert tool_input.source_note_id == "a"
        assert tool_input.link_type is LinkType.RELATED

    def test_unknown_link_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LinkNotesInput.model_validate(
                {"sourceId": "a", "targetId": "b", "linkType": "refutes"}
            )


class TestQueryDatabaseInput:
    def test_visualization_defaults_to_table(self) -> None:
        tool_input = QueryDatabaseInput.model_validate({"query": "how many projects"})

        assert tool_input.visualization is Visualization.TABLE
