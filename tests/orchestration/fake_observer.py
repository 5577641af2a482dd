"""FakeOrchestrationObserver — records step loop events for assertion in tests."""

from dataclasses import dataclass

from thinkspace.orchestration.domain.state import LoopState, TerminationReason


@dataclass(frozen=True)
class ToolRejectedEvent:
    user_id: str
    call_id: str
    tool_name: str
    reason: str


@dataclass(frozen=True)
class UpstreamFailedEvent:
    user_id: str
    step: int
    reason: str


@dataclass(frozen=True)
class TurnTerminatedEvent:
    user_id: str
    steps: int
    reason: TerminationReason
    duration_ms: int


@dataclass(frozen=True)
class TurnCrashedEvent:
    user_id: str
    reason: str


class FakeOrchestrationObserver:
    """Records all emitted step loop events as typed frozen dataclasses."""

    def __init__(self) -> None:
        self.started: list[tuple[str, int]] = []
        self.states: list[tuple[int, LoopState]] = []
        self.rejected: list[ToolRejectedEvent] = []
        self.upstream_failures: list[UpstreamFailedEvent] = []
        self.terminated: list[TurnTerminatedEvent] = []
        self.crashed: list[TurnCrashedEvent] = []

    def turn_started(self, user_id: str, message_count: int) -> None:
        self.started.append((user_id, message_count))

    def loop_state_changed(self, user_id: str, step: int, state: LoopState) -> None:
        self.states.append((step, state))

    def tool_rejected(
        self, user_id: str, call_id: str, tool_name: str, reason: str
    ) -> None:
        self.rejected.append(
            ToolRejectedEvent(
                user_id=user_id, call_id=call_id, tool_name=tool_name, reason=reason
            )
        )

    def upstream_failed(self, user_id: str, step: int, reason: str) -> None:
        self.upstream_failures.append(
            UpstreamFailedEvent(user_id=user_id, step=step, reason=reason)
        )

    def turn_terminated(
        self,
        user_id: str,
        steps: int,
        reason: TerminationReason,
        duration_ms: int,
    ) -> None:
        self.terminated.append(
            TurnTerminatedEvent(
                user_id=user_id, steps=steps, reason=reason, duration_ms=duration_ms
            )
        )

    def turn_crashed(self, user_id: str, reason: str) -> None:
        self.crashed.append(TurnCrashedEvent(user_id=user_id, reason=reason))
