"""ToolObserver port — domain events emitted while tools are registered and executed."""

from typing import Protocol


class ToolObserver(Protocol):
    """Observer port for tool domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def tool_registered(self, tool_name: str) -> None: ...

    def tool_execution_started(self, tool_name: str, user_id: str) -> None: ...

    def tool_execution_completed(
        self, tool_name: str, user_id: str, success: bool, duration_ms: int
    ) -> None: ...

    def tool_execution_failed(
        self, tool_name: str, user_id: str, reason: str
    ) -> None: ...

    def tool_access_denied(
        self, tool_name: str, user_id: str, resource: str
    ) -> None: ...

    def tool_connection_skipped(
        self, tool_name: str, user_id: str, target_id: str, reason: str
    ) -> None: ...
