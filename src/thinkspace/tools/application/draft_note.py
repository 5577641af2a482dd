"""draft_note — one categorized note, optionally linked to existing notes."""

from thinkspace.knowledge.domain.store import KnowledgeStore
from thinkspace.tools.domain.inputs import DraftNoteInput
from thinkspace.tools.domain.observer import ToolObserver
from thinkspace.tools.domain.result import ToolResult, ToolSuccess

TOOL_NAME = "draft_note"
PREVIEW_LENGTH = 150


class DraftNoteAdapter:
    def __init__(self, store: KnowledgeStore, observer: ToolObserver) -> None:
        self._store = store
        self._observer = observer

    async def execute(self, user_id: str, tool_input: DraftNoteInput) -> ToolResult:
        tags = [tool_input.category.value, *tool_input.tags]
        note = await self._store.create_note(
            owner_id=user_id,
            title=tool_input.title,
            content=tool_input.content,
            tags=tags,
            metadata={"createdByAI": True, "sources": list(tool_input.related_note_ids)},
        )

        linked = 0
        for related_id in tool_input.related_note_ids:
            if await self._link(user_id=user_id, note_id=note.id, related_id=related_id):
                linked += 1

        return ToolSuccess(
            payload={
                "id": note.id,
                "title": note.title,
                "preview": note.content[:PREVIEW_LENGTH],
                "tags": tags,
                "category": tool_input.category.value,
                "linkedCount": linked,
                "message": f'Note "{note.title}" drafted successfully',
            }
        )

    async def _link(self, user_id: str, note_id: str, related_id: str) -> bool:
        """Create a one-way RELATED connection; skip ids the caller cannot see."""
        related = await self._store.get_note(related_id)
        if related is None or related.owner_id != user_id:
            self._observer.tool_connection_skipped(
                tool_name=TOOL_NAME,
                user_id=user_id,
                target_id=related_id,
                reason="not found or unauthorized",
            )
            return False
        try:
            await self._store.create_connection(
                owner_id=user_id,
                source_note_id=note_id,
                target_note_id=related_id,
                link_type="RELATED",
                bidirectional=False,
            )
        except Exception as exc:
            self._observer.tool_connection_skipped(
                tool_name=TOOL_NAME, user_id=user_id, target_id=related_id, reason=str(exc)
            )
            return False
        return True
