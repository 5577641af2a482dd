"""search_notes — ranked search over the caller's notes."""

from thinkspace.knowledge.domain.search import NoteSearch, ScoredNote
from thinkspace.tools.domain.inputs import SearchNotesInput
from thinkspace.tools.domain.result import ToolResult, ToolSuccess

EXCERPT_LENGTH = 200


def _to_result(hit: ScoredNote) -> dict[str, object]:
    note = hit.note
    return {
        "id": note.id,
        "title": note.title,
        "excerpt": note.content[:EXCERPT_LENGTH].strip(),
        "tags": list(note.tags),
        "lastModified": note.updated_at.isoformat(),
        "relevanceScore": round(hit.score, 4),
    }


class SearchNotesAdapter:
    """Delegates ranking to the NoteSearch port and shapes the top hits."""

    def __init__(self, search: NoteSearch) -> None:
        self._search = search

    async def execute(self, user_id: str, tool_input: SearchNotesInput) -> ToolResult:
        hits = await self._search.search(
            owner_id=user_id,
            query=tool_input.query,
            category=tool_input.category,
            limit=tool_input.limit,
        )
        results = [_to_result(hit) for hit in hits[: tool_input.limit]]
        return ToolSuccess(
            payload={"results": results, "count": len(results), "query": tool_input.query}
        )
