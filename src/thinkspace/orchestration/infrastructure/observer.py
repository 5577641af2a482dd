"""Structlog implementation of the OrchestrationObserver port."""

import structlog

from thinkspace.orchestration.domain.state import LoopState, TerminationReason


class StructlogOrchestrationObserver:
    """Delegates step loop events to structlog.

    Satisfies the OrchestrationObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def turn_started(self, user_id: str, message_count: int) -> None:
        self._log.info(
            "orchestration.turn_started", user_id=user_id, message_count=message_count
        )

    def loop_state_changed(self, user_id: str, step: int, state: LoopState) -> None:
        self._log.debug(
            "orchestration.state_changed", user_id=user_id, step=step, state=str(state)
        )

    def tool_rejected(
        self, user_id: str, call_id: str, tool_name: str, reason: str
    ) -> None:
        self._log.warning(
            "orchestration.tool_rejected",
            user_id=user_id,
            call_id=call_id,
            tool_name=tool_name,
            reason=reason,
        )

    def upstream_failed(self, user_id: str, step: int, reason: str) -> None:
        self._log.error(
            "orchestration.upstream_failed", user_id=user_id, step=step, reason=reason
        )

    def turn_terminated(
        self,
        user_id: str,
        steps: int,
        reason: TerminationReason,
        duration_ms: int,
    ) -> None:
        self._log.info(
            "orchestration.turn_terminated",
            user_id=user_id,
            steps=steps,
            reason=str(reason),
            duration_ms=duration_ms,
        )

    def turn_crashed(self, user_id: str, reason: str) -> None:
        self._log.error("orchestration.turn_crashed", user_id=user_id, reason=reason)
