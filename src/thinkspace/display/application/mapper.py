"""Result display mapper — normalizes tool outputs into their canonical shapes.

Accepts three kinds of input for each tool: the canonical payload itself
(returned unchanged), an API envelope that nests the payload under a key
(``{"success": true, "project": {...}, "message": ...}`` or
``{"success": true, "payload": {...}}``), and ad-hoc partial objects whose
fields go by other names. Missing counts fall back to the length of the
matching list; missing text falls back to an empty string or a placeholder
title. None means the output has not arrived yet and maps to None.

All functions here are pure.
"""

from collections.abc import Callable, Mapping
from typing import Any

from thinkspace.display.domain.display import DisplayStatus, ToolDisplay
from thinkspace.display.domain.shapes import CANONICAL_SHAPES
from thinkspace.tools.domain.result import ToolFailure, ToolSuccess

DEFAULT_NODE_COLOR = "#228be6"

type Raw = Mapping[str, Any]
type Normalizer = Callable[[Raw], dict[str, Any]]


def _pick(raw: Raw, *keys: str, default: Any = None) -> Any:
    """First value present (not None) under any of keys."""
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return default


def _text(raw: Raw, *keys: str, default: str = "") -> str:
    value = _pick(raw, *keys)
    return str(value) if value else default


def _list(raw: Raw, *keys: str) -> list[Any]:
    value = _pick(raw, *keys)
    return list(value) if isinstance(value, list | tuple) else []


def _count(raw: Raw, keys: tuple[str, ...], items: list[Any]) -> int:
    """Explicit count when it is a whole number, else the number of items."""
    value = _pick(raw, *keys)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return len(items)


def _nested_title(raw: Raw, key: str) -> str | None:
    nested = raw.get(key)
    if isinstance(nested, Mapping):
        return nested.get("title")
    return None


# ----------------------------------------------------------------------
# Per-tool normalizers
# ----------------------------------------------------------------------


def _search_result(item: Raw) -> dict[str, Any]:
    content = _text(item, "content")
    return {
        "id": _text(item, "id"),
        "title": _text(item, "title", default="Untitled Note"),
        "excerpt": _text(item, "excerpt", default=content[:200].strip()),
        "tags": _list(item, "tags"),
        "lastModified": _text(item, "lastModified", "updatedAt"),
        "relevanceScore": float(_pick(item, "relevanceScore", "score", default=0.0)),
    }


def _search_notes(raw: Raw) -> dict[str, Any]:
    items = _list(raw, "results", "items")
    results = [_search_result(i) if isinstance(i, Mapping) else i for i in items]
    return {
        "results": results,
        "count": _count(raw, ("count", "total"), results),
        "query": _text(raw, "query", "searchQuery"),
    }


def _create_project(raw: Raw) -> dict[str, Any]:
    return {
        "id": _text(raw, "id"),
        "title": _text(raw, "title", "name", default="Untitled Project"),
        "description": _text(raw, "description"),
        "goalsCount": _count(raw, ("goalsCount",), _list(raw, "goals")),
        "tasksCount": _count(raw, ("tasksCount",), _list(raw, "tasks")),
        "message": _text(raw, "message"),
    }


def _draft_note(raw: Raw) -> dict[str, Any]:
    return {
        "id": _text(raw, "id"),
        "title": _text(raw, "title", default="Untitled Note"),
        "preview": _text(raw, "preview", default=_text(raw, "content")[:150]),
        "tags": _list(raw, "tags"),
        "category": _text(raw, "category", "paraCategory"),
        "message": _text(raw, "message"),
    }


def _link_notes(raw: Raw) -> dict[str, Any]:
    source_title = _pick(raw, "sourceTitle") or _nested_title(raw, "sourceNote")
    target_title = _pick(raw, "targetTitle") or _nested_title(raw, "targetNote")
    return {
        "id": _text(raw, "id"),
        "sourceTitle": source_title or "Untitled Note",
        "targetTitle": target_title or "Untitled Note",
        "linkType": _text(raw, "linkType", "type", default="related").lower(),
        "message": _text(raw, "message"),
    }


def _timeline_event(event: Raw) -> dict[str, Any]:
    return {
        "title": _text(event, "title", default="Untitled Event"),
        "date": _text(event, "date"),
        "isMilestone": bool(_pick(event, "isMilestone", "milestone", default=False)),
    }


def _create_timeline(raw: Raw) -> dict[str, Any]:
    events = [
        _timeline_event(e) if isinstance(e, Mapping) else e for e in _list(raw, "events")
    ]
    return {
        "projectId": _text(raw, "projectId"),
        "projectTitle": _text(raw, "projectTitle", "title", default="Untitled Timeline"),
        "eventsCount": _count(raw, ("eventsCount",), events),
        "events": events,
        "message": _text(raw, "message"),
    }


def _mindmap_node(node: Raw) -> dict[str, Any]:
    return {
        "id": _text(node, "id"),
        "label": _text(node, "label", "title", default="Untitled Node"),
        "parentId": _pick(node, "parentId"),
        "color": _text(node, "color", default=DEFAULT_NODE_COLOR),
    }


def _create_mindmap(raw: Raw) -> dict[str, Any]:
    nodes = [_mindmap_node(n) if isinstance(n, Mapping) else n for n in _list(raw, "nodes")]
    return {
        "id": _text(raw, "id"),
        "title": _text(raw, "title", "centralTopic", default="Untitled Mind Map"),
        "nodesCount": _count(raw, ("nodesCount",), nodes),
        "nodes": nodes,
        "message": _text(raw, "message"),
    }


def _query_database(raw: Raw) -> dict[str, Any]:
    results = _list(raw, "results", "data")
    return {
        "query": _text(raw, "query", default="Query"),
        "sql": _text(raw, "sql"),
        "results": results,
        "visualization": _text(raw, "visualization", default="table"),
        "rowCount": _count(raw, ("rowCount",), results),
        "message": _text(raw, "message"),
    }


_NORMALIZERS: dict[str, Normalizer] = {
    "search_notes": _search_notes,
    "create_project": _create_project,
    "draft_note": _draft_note,
    "link_notes": _link_notes,
    "create_timeline": _create_timeline,
    "create_mindmap": _create_mindmap,
    "query_database": _query_database,
}


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------


def _unwrap_envelope(tool_name: str, raw: Raw) -> Raw:
    """Return the payload nested in an API envelope, or raw itself."""
    shape = CANONICAL_SHAPES[tool_name]
    for key in (shape.envelope_key, "payload"):
        inner = raw.get(key)
        if isinstance(inner, Mapping):
            message = raw.get("message")
            if message is not None and inner.get("message") is None:
                return {**inner, "message": message}
            return inner
    return raw


def map_tool_output(tool_name: str, raw: Raw | None) -> Raw | None:
    """Normalize one tool's raw output into its canonical shape.

    Canonical input is returned unchanged, so mapping is idempotent. Output of
    a tool without a canonical shape is returned unchanged.
    """
    if raw is None:
        return None
    shape = CANONICAL_SHAPES.get(tool_name)
    if shape is None:
        return raw
    if all(field in raw for field in shape.fields):
        return raw
    return _NORMALIZERS[tool_name](_unwrap_envelope(tool_name, raw))


def display(
    tool_name: str, result: ToolSuccess | ToolFailure | Raw | None
) -> ToolDisplay:
    """Classify a tool result as pending, success or failure for rendering.

    Accepts a ToolResult, its wire form as a mapping, or None.
    """
    if result is None:
        return ToolDisplay(tool_name=tool_name, status=DisplayStatus.PENDING)

    if isinstance(result, ToolFailure):
        return ToolDisplay(
            tool_name=tool_name, status=DisplayStatus.FAILURE, error=result.error
        )
    if isinstance(result, ToolSuccess):
        payload: Raw | None = result.payload
    elif result.get("success") is False:
        return ToolDisplay(
            tool_name=tool_name,
            status=DisplayStatus.FAILURE,
            error=_text(result, "error", default="Unknown error"),
        )
    else:
        payload = result

    data = map_tool_output(tool_name, payload)
    return ToolDisplay(
        tool_name=tool_name,
        status=DisplayStatus.SUCCESS,
        data=dict(data) if data is not None else None,
    )
