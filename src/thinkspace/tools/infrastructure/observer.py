"""Structlog implementation of the ToolObserver port."""

import structlog


class StructlogToolObserver:
    """Delegates tool domain events to structlog.

    Satisfies the ToolObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def tool_registered(self, tool_name: str) -> None:
        self._log.debug("tool.registered", tool_name=tool_name)

    def tool_execution_started(self, tool_name: str, user_id: str) -> None:
        self._log.info("tool.execution_started", tool_name=tool_name, user_id=user_id)

    def tool_execution_completed(
        self, tool_name: str, user_id: str, success: bool, duration_ms: int
    ) -> None:
        self._log.info(
            "tool.execution_completed",
            tool_name=tool_name,
            user_id=user_id,
            success=success,
            duration_ms=duration_ms,
        )

    def tool_execution_failed(
        self, tool_name: str, user_id: str, reason: str
    ) -> None:
        self._log.error(
            "tool.execution_failed",
            tool_name=tool_name,
            user_id=user_id,
            reason=reason,
        )

    def tool_access_denied(
        self, tool_name: str, user_id: str, resource: str
    ) -> None:
        self._log.warning(
            "tool.access_denied",
            tool_name=tool_name,
            user_id=user_id,
            resource=resource,
        )

    def tool_connection_skipped(
        self, tool_name: str, user_id: str, target_id: str, reason: str
    ) -> None:
        self._log.debug(
            "tool.connection_skipped",
            tool_name=tool_name,
            user_id=user_id,
            target_id=target_id,
            reason=reason,
        )
