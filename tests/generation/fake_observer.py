"""FakeGenerationObserver — records generation domain events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationStartedEvent:
    model: str
    message_count: int
    tool_count: int


@dataclass(frozen=True)
class GenerationCompletedEvent:
    model: str
    duration_ms: int
    text_chars: int
    tool_calls: int


@dataclass(frozen=True)
class GenerationFailedEvent:
    model: str
    reason: str


class FakeGenerationObserver:
    def __init__(self) -> None:
        self.started: list[GenerationStartedEvent] = []
        self.completed: list[GenerationCompletedEvent] = []
        self.failed: list[GenerationFailedEvent] = []

    def generation_started(
        self, model: str, message_count: int, tool_count: int
    ) -> None:
        self.started.append(
            GenerationStartedEvent(
                model=model, message_count=message_count, tool_count=tool_count
            )
        )

    def generation_completed(
        self, model: str, duration_ms: int, text_chars: int, tool_calls: int
    ) -> None:
        self.completed.append(
            GenerationCompletedEvent(
                model=model,
                duration_ms=duration_ms,
                text_chars=text_chars,
                tool_calls=tool_calls,
            )
        )

    def generation_failed(self, model: str, reason: str) -> None:
        self.failed.append(GenerationFailedEvent(model=model, reason=reason))
