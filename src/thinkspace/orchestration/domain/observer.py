"""OrchestrationObserver port — domain events emitted by the step loop."""

from typing import Protocol

from thinkspace.orchestration.domain.state import LoopState, TerminationReason


class OrchestrationObserver(Protocol):
    """Observer port for step loop events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def turn_started(self, user_id: str, message_count: int) -> None: ...

    def loop_state_changed(self, user_id: str, step: int, state: LoopState) -> None: ...

    def tool_rejected(
        self, user_id: str, call_id: str, tool_name: str, reason: str
    ) -> None: ...

    def upstream_failed(self, user_id: str, step: int, reason: str) -> None: ...

    def turn_terminated(
        self,
        user_id: str,
        steps: int,
        reason: TerminationReason,
        duration_ms: int,
    ) -> None: ...

    def turn_crashed(self, user_id: str, reason: str) -> None: ...
