"""link_notes — one bidirectional connection between two of the caller's notes."""

from thinkspace.knowledge.domain.store import KnowledgeStore
from thinkspace.tools.domain.inputs import LinkNotesInput
from thinkspace.tools.domain.result import ToolResult, ToolSuccess
from thinkspace.tools.infrastructure.errors import UnauthorizedResourceError


class LinkNotesAdapter:
    def __init__(self, store: KnowledgeStore) -> None:
        self._store = store

    async def execute(self, user_id: str, tool_input: LinkNotesInput) -> ToolResult:
        source = await self._store.get_note(tool_input.source_note_id)
        target = await self._store.get_note(tool_input.target_note_id)
        if (
            source is None
            or target is None
            or source.owner_id != user_id
            or target.owner_id != user_id
        ):
            raise UnauthorizedResourceError(resource="one or both notes")

        connection = await self._store.create_connection(
            owner_id=user_id,
            source_note_id=source.id,
            target_note_id=target.id,
            link_type=tool_input.link_type.value.upper(),
            bidirectional=True,
        )
        return ToolSuccess(
            payload={
                "id": connection.id,
                "sourceTitle": source.title,
                "targetTitle": target.title,
                "linkType": tool_input.link_type.value,
                "message": f'Linked "{source.title}" → "{target.title}"',
            }
        )
