"""GenerationObserver port — domain events emitted around model calls."""

from typing import Protocol


class GenerationObserver(Protocol):
    def generation_started(
        self, model: str, message_count: int, tool_count: int
    ) -> None: ...

    def generation_completed(
        self, model: str, duration_ms: int, text_chars: int, tool_calls: int
    ) -> None: ...

    def generation_failed(self, model: str, reason: str) -> None: ...
