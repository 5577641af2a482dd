"""NoteSearch Protocol — the semantic search collaborator over a user's notes."""

from typing import Protocol

from pydantic import BaseModel, Field

from thinkspace.knowledge.domain.category import ParaCategory
from thinkspace.knowledge.domain.records import Note


class ScoredNote(BaseModel, frozen=True):
    """One ranked search hit. score is a relevance in [0, 1]."""

    note: Note
    score: float = Field(ge=0.0, le=1.0)


class NoteSearch(Protocol):
    """Ranks one owner's notes against a query, best match first."""

    async def search(
        self,
        owner_id: str,
        query: str,
        category: ParaCategory | None,
        limit: int,
    ) -> list[ScoredNote]: ...
