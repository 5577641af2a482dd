"""create_timeline — stores a dated event list on one of the caller's projects."""

from datetime import UTC, datetime

from thinkspace.knowledge.domain.store import KnowledgeStore
from thinkspace.tools.application.ownership import require_owned
from thinkspace.tools.domain.inputs import CreateTimelineInput
from thinkspace.tools.domain.result import ToolResult, ToolSuccess


class CreateTimelineAdapter:
    def __init__(self, store: KnowledgeStore) -> None:
        self._store = store

    async def execute(self, user_id: str, tool_input: CreateTimelineInput) -> ToolResult:
        project = require_owned(
            await self._store.get_project(tool_input.project_id),
            user_id=user_id,
            resource="project",
        )

        timeline = {
            "events": [event.model_dump(by_alias=True) for event in tool_input.events],
            "createdAt": datetime.now(UTC).isoformat(),
            "createdByAI": True,
        }
        await self._store.update_project_metadata(
            project_id=project.id, metadata={**project.metadata, "timeline": timeline}
        )

        return ToolSuccess(
            payload={
                "projectId": project.id,
                "projectTitle": project.title,
                "eventsCount": len(tool_input.events),
                "events": [
                    {"title": e.title, "date": e.date, "isMilestone": e.milestone}
                    for e in tool_input.events
                ],
                "message": f"Timeline created with {len(tool_input.events)} events",
            }
        )
