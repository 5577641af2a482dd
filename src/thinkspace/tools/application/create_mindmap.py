"""create_mindmap — persists a mind map as a graph snapshot."""

from thinkspace.knowledge.domain.store import KnowledgeStore
from thinkspace.tools.application.ownership import require_owned
from thinkspace.tools.domain.inputs import CreateMindmapInput
from thinkspace.tools.domain.result import ToolResult, ToolSuccess

DEFAULT_NODE_COLOR = "#228be6"


class CreateMindmapAdapter:
    def __init__(self, store: KnowledgeStore) -> None:
        self._store = store

    async def execute(self, user_id: str, tool_input: CreateMindmapInput) -> ToolResult:
        if tool_input.area_id is not None:
            require_owned(
                await self._store.get_area(tool_input.area_id),
                user_id=user_id,
                resource="area",
            )

        topic = tool_input.central_topic
        snapshot = await self._store.create_snapshot(
            owner_id=user_id,
            title=topic,
            description=f"Mind map for {topic}",
            data={
                "centralTopic": topic,
                "nodes": [node.model_dump(by_alias=True) for node in tool_input.nodes],
                "createdByAI": True,
                "areaId": tool_input.area_id,
            },
        )

        return ToolSuccess(
            payload={
                "id": snapshot.id,
                "title": topic,
                "nodesCount": len(tool_input.nodes),
                "nodes": [
                    {
                        "id": node.id,
                        "label": node.label,
                        "parentId": node.parent_id,
                        "color": node.color or DEFAULT_NODE_COLOR,
                    }
                    for node in tool_input.nodes
                ],
                "message": f'Mind map "{topic}" created with {len(tool_input.nodes)} nodes',
            }
        )
