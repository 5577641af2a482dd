"""Canonical display shapes of each tool's success payload."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CanonicalShape:
    """Fields a rendering layer may rely on for one tool.

    envelope_key names the object an API envelope nests the payload under.
    """

    tool_name: str
    envelope_key: str
    fields: tuple[str, ...]


CANONICAL_SHAPES: dict[str, CanonicalShape] = {
    shape.tool_name: shape
    for shape in (
        CanonicalShape("search_notes", "searchResults", ("results", "count", "query")),
        CanonicalShape(
            "create_project",
            "project",
            ("id", "title", "description", "goalsCount", "tasksCount", "message"),
        ),
        CanonicalShape(
            "draft_note",
            "note",
            ("id", "title", "preview", "tags", "category", "message"),
        ),
        CanonicalShape(
            "link_notes",
            "link",
            ("id", "sourceTitle", "targetTitle", "linkType", "message"),
        ),
        CanonicalShape(
            "create_timeline",
            "timeline",
            ("projectId", "projectTitle", "eventsCount", "events", "message"),
        ),
        CanonicalShape(
            "create_mindmap",
            "mindmap",
            ("id", "title", "nodesCount", "nodes", "message"),
        ),
        CanonicalShape(
            "query_database",
            "queryResult",
            ("query", "sql", "results", "visualization", "rowCount", "message"),
        ),
    )
}
