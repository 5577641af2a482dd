"""Structlog implementation of the GenerationObserver port."""

import structlog


class StructlogGenerationObserver:
    """Delegates generation domain events to structlog.

    Satisfies the GenerationObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def generation_started(
        self, model: str, message_count: int, tool_count: int
    ) -> None:
        self._log.info(
            "generation.started",
            model=model,
            message_count=message_count,
            tool_count=tool_count,
        )

    def generation_completed(
        self, model: str, duration_ms: int, text_chars: int, tool_calls: int
    ) -> None:
        self._log.info(
            "generation.completed",
            model=model,
            duration_ms=duration_ms,
            text_chars=text_chars,
            tool_calls=tool_calls,
        )

    def generation_failed(self, model: str, reason: str) -> None:
        self._log.error("generation.failed", model=model, reason=reason)
