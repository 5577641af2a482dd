"""Structlog implementation of the ApiObserver port."""

import structlog


class StructlogApiObserver:
    """Delegates HTTP layer events to structlog.

    Satisfies the ApiObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def request_unauthorized(self, path: str, reason: str) -> None:
        self._log.warning("api.request_unauthorized", path=path, reason=reason)

    def stream_opened(self, user_id: str, turn_count: int) -> None:
        self._log.info("api.stream_opened", user_id=user_id, turn_count=turn_count)

    def stream_finished(self, user_id: str, event_count: int, cancelled: bool) -> None:
        self._log.info(
            "api.stream_finished",
            user_id=user_id,
            event_count=event_count,
            cancelled=cancelled,
        )
