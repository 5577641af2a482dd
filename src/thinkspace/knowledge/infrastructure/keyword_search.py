"""KeywordNoteSearch — token-overlap NoteSearch over a KnowledgeStore.

Stands in for the vector-search collaborator wherever embeddings are not
available. The score is the fraction of distinct query terms found in the
note's title, content, or tags, so it always lies in [0, 1].
"""

import re

from thinkspace.knowledge.domain.category import ParaCategory
from thinkspace.knowledge.domain.records import Note
from thinkspace.knowledge.domain.search import ScoredNote
from thinkspace.knowledge.domain.store import KnowledgeStore

_TOKEN_PATTERN = re.compile(r"[a-z0-9]+")


def _tokens(text: str) -> set[str]:
    return set(_TOKEN_PATTERN.findall(text.lower()))


def _note_tokens(note: Note) -> set[str]:
    return _tokens(note.title) | _tokens(note.content) | _tokens(" ".join(note.tags))


class KeywordNoteSearch:
    """Satisfies the NoteSearch protocol by scoring term overlap."""

    def __init__(self, store: KnowledgeStore) -> None:
        self._store = store

    async def search(
        self,
        owner_id: str,
        query: str,
        category: ParaCategory | None,
        limit: int,
    ) -> list[ScoredNote]:
        terms = _tokens(query)
        if not terms:
            return []

        notes = await self._store.list_notes(owner_id)
        if category is not None:
            notes = [n for n in notes if category.value in n.tags]

        scored: list[ScoredNote] = []
        for note in notes:
            hits = len(terms & _note_tokens(note))
            if hits:
                scored.append(ScoredNote(note=note, score=hits / len(terms)))

        scored.sort(key=lambda s: (s.score, s.note.updated_at), reverse=True)
        return scored[:limit]
