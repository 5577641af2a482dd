"""Tests for the create_mindmap adapter."""

import pytest

from thinkspace.knowledge.infrastructure.memory_store import InMemoryKnowledgeStore
from thinkspace.tools.application.create_mindmap import CreateMindmapAdapter
from thinkspace.tools.domain.inputs import CreateMindmapInput, MindmapNodeInput
from thinkspace.tools.domain.result import ToolSuccess
from thinkspace.tools.infrastructure.errors import UnauthorizedResourceError

_NODES = [
    MindmapNodeInput(id="n1", label="Sleep"),
    MindmapNodeInput(id="n2", label="Naps", parent_id="n1", color="#ff0000"),
]


class TestCreateMindmapAdapter:
    async def test_persists_snapshot(self) -> None:
        store = InMemoryKnowledgeStore()
        adapter = CreateMindmapAdapter(store=store)

        result = await adapter.execute(
            "user-1", CreateMindmapInput(central_topic="Health", nodes=_NODES)
        )

        assert isinstance(result, ToolSuccess)
        assert result.payload["title"] == "Health"
        assert result.payload["nodesCount"] == 2
        assert [n["color"] for n in result.payload["nodes"]] == ["#228be6", "#ff0000"]
        assert result.payload["nodes"][1]["parentId"] == "n1"
        snapshot = store.snapshots[result.payload["id"]]
        assert snapshot.description == "Mind map for Health"
        assert snapshot.data["centralTopic"] == "Health"

    async def test_owned_area_is_accepted(self) -> None:
        store = InMemoryKnowledgeStore()
        area = await store.create_area(owner_id="user-1", title="Health")
        adapter = CreateMindmapAdapter(store=store)

        result = await adapter.execute(
            "user-1",
            CreateMindmapInput(central_topic="Health", nodes=_NODES, area_id=area.id),
        )

        assert store.snapshots[result.payload["id"]].data["areaId"] == area.id

    async def test_foreign_area_is_rejected(self) -> None:
        store = InMemoryKnowledgeStore()
        area = await store.create_area(owner_id="user-2", title="Health")
        adapter = CreateMindmapAdapter(store=store)

        with pytest.raises(UnauthorizedResourceError):
            await adapter.execute(
                "user-1",
                CreateMindmapInput(
                    central_topic="Health", nodes=_NODES, area_id=area.id
                ),
            )

        assert store.snapshots == {}
