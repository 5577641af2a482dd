"""create_project — a project plus its initial tasks."""

from thinkspace.knowledge.domain.store import KnowledgeStore
from thinkspace.tools.domain.inputs import CreateProjectInput
from thinkspace.tools.domain.observer import ToolObserver
from thinkspace.tools.domain.result import ToolFailure, ToolResult, ToolSuccess

TOOL_NAME = "create_project"


class CreateProjectAdapter:
    """Creates the project, then each task in order.

    Not atomic: when a task fails the project and the tasks before it remain
    committed, and the failure names how many tasks made it.
    """

    def __init__(self, store: KnowledgeStore, observer: ToolObserver) -> None:
        self._store = store
        self._observer = observer

    async def execute(self, user_id: str, tool_input: CreateProjectInput) -> ToolResult:
        project = await self._store.create_project(
            owner_id=user_id,
            title=tool_input.title,
            description=tool_input.description,
            goals=tool_input.goals,
            start_date=tool_input.start_date,
            due_date=tool_input.due_date,
            metadata={"goals": list(tool_input.goals), "createdByAI": True},
        )

        created = 0
        for draft in tool_input.tasks:
            try:
                await self._store.create_task(
                    owner_id=user_id,
                    project_id=project.id,
                    title=draft.title,
                    due_date=draft.due_date,
                )
            except Exception as exc:
                self._observer.tool_execution_failed(
                    tool_name=TOOL_NAME,
                    user_id=user_id,
                    reason=f"task {created + 1} of {len(tool_input.tasks)} for project {project.id}: {exc}",
                )
                return ToolFailure(
                    error=(
                        f"Failed to create all project tasks: created {created} of "
                        f"{len(tool_input.tasks)} tasks for project {project.id}"
                    )
                )
            created += 1

        return ToolSuccess(
            payload={
                "id": project.id,
                "title": project.title,
                "description": project.description,
                "goalsCount": len(tool_input.goals),
                "tasksCount": created,
                "message": f'Project "{project.title}" created successfully with {created} tasks',
            }
        )
