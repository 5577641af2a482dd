"""query_database — keyword-dispatched analytics over the caller's records.

Not a query planner: the lowercased question is matched against a fixed list
of intents, first match wins.
"""

from typing import Any

from thinkspace.knowledge.domain.store import KnowledgeStore
from thinkspace.tools.domain.inputs import QueryDatabaseInput
from thinkspace.tools.domain.result import ToolFailure, ToolResult, ToolSuccess

COUNT_KEYWORDS = ("count", "how many", "number of", "total")
RECENT_LIMIT = 10

PROJECT_COUNT_SQL = "SELECT COUNT(*) as count FROM projects WHERE user_id = $1"
TASK_STATUS_SQL = (
    "SELECT status, COUNT(*) as count FROM tasks WHERE user_id = $1 GROUP BY status"
)
NOTE_COUNT_SQL = "SELECT COUNT(*) as count FROM notes WHERE user_id = $1"
RECENT_PROJECTS_SQL = (
    "SELECT title, created_at FROM projects WHERE user_id = $1 "
    f"ORDER BY created_at DESC LIMIT {RECENT_LIMIT}"
)

UNSUPPORTED_QUERY = (
    'Failed to execute query: not supported. Try: "count projects", '
    '"task status", "count notes", "recent projects"'
)


def _asks_for_count(text: str) -> bool:
    return any(keyword in text for keyword in COUNT_KEYWORDS)


class QueryDatabaseAdapter:
    def __init__(self, store: KnowledgeStore) -> None:
        self._store = store

    async def execute(self, user_id: str, tool_input: QueryDatabaseInput) -> ToolResult:
        text = tool_input.query.lower()
        results: list[dict[str, Any]]

        if "project" in text and _asks_for_count(text):
            sql = PROJECT_COUNT_SQL
            results = [{"count": await self._store.count_projects(user_id)}]
        elif "task" in text and "status" in text:
            sql = TASK_STATUS_SQL
            counts = await self._store.task_status_counts(user_id)
            results = [
                {"status": status.value, "count": count}
                for status, count in counts.items()
            ]
        elif "note" in text and _asks_for_count(text):
            sql = NOTE_COUNT_SQL
            results = [{"count": await self._store.count_notes(user_id)}]
        elif "recent" in text:
            sql = RECENT_PROJECTS_SQL
            projects = await self._store.recent_projects(user_id, limit=RECENT_LIMIT)
            results = [
                {"title": p.title, "createdAt": p.created_at.isoformat()}
                for p in projects
            ]
        else:
            return ToolFailure(error=UNSUPPORTED_QUERY)

        return ToolSuccess(
            payload={
                "query": tool_input.query,
                "sql": sql,
                "results": results,
                "visualization": tool_input.visualization.value,
                "rowCount": len(results),
                "message": f"Query executed successfully. Found {len(results)} results.",
            }
        )
