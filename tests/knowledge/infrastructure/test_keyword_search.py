"""Tests for KeywordNoteSearch — term-overlap ranking."""

from thinkspace.knowledge.domain.category import ParaCategory
from thinkspace.knowledge.infrastructure.keyword_search import KeywordNoteSearch
from thinkspace.knowledge.infrastructure.memory_store import InMemoryKnowledgeStore


async def _make_store() -> InMemoryKnowledgeStore:
    store = InMemoryKnowledgeStore()
    await store.create_note(
        owner_id="user-1",
        title="Marathon training",
        content="Weekly long run and tempo run.",
        tags=["area", "health"],
        metadata={},
    )
    await store.create_note(
        owner_id="user-1",
        title="Static sites",
        content="Hugo and Eleventy compared for a training site.",
        tags=["resource"],
        metadata={},
    )
    await store.create_note(
        owner_id="user-2",
        title="Marathon training",
        content="Not visible to user-1.",
        tags=["area"],
        metadata={},
    )
    return store


class TestKeywordNoteSearch:
    """Scores are the fraction of distinct query terms present in a note."""

    async def test_ranks_by_fraction_of_matched_terms(self) -> None:
        search = KeywordNoteSearch(store=await _make_store())

        hits = await search.search(
            owner_id="user-1", query="marathon training", category=None, limit=5
        )

        assert [h.note.title for h in hits] == ["Marathon training", "Static sites"]
        assert hits[0].score == 1.0
        assert hits[1].score == 0.5

    async def test_only_searches_callers_notes(self) -> None:
        search = KeywordNoteSearch(store=await _make_store())

        hits = await search.search(
            owner_id="user-1", query="visible", category=None, limit=5
        )

        assert hits == []

    async def test_category_filter_uses_tags(self) -> None:
        search = KeywordNoteSearch(store=await _make_store())

        hits = await search.search(
            owner_id="user-1",
            query="training",
            category=ParaCategory.RESOURCE,
            limit=5,
        )

        assert [h.note.title for h in hits] == ["Static sites"]

    async def test_limit_truncates(self) -> None:
        search = KeywordNoteSearch(store=await _make_store())

        hits = await search.search(
            owner_id="user-1", query="training", category=None, limit=1
        )

        assert len(hits) == 1

    async def test_query_without_terms_returns_nothing(self) -> None:
        search = KeywordNoteSearch(store=await _make_store())

        assert await search.search(owner_id="user-1", query="?!", category=None, limit=5) == []
