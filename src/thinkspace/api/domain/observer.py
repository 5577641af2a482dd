"""ApiObserver port — domain events emitted by the HTTP layer."""

from typing import Protocol


class ApiObserver(Protocol):
    def request_unauthorized(self, path: str, reason: str) -> None: ...

    def stream_opened(self, user_id: str, turn_count: int) -> None: ...

    def stream_finished(self, user_id: str, event_count: int, cancelled: bool) -> None: ...
