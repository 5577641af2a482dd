"""EventSink Protocol — the write side of one turn's event stream."""

from typing import Protocol

from thinkspace.streaming.domain.events import StreamEvent


class EventSink(Protocol):
    """Ordered, single-writer event stream.

    close() and fail() write the terminal event and end the stream; cancel()
    records that the client has gone and ends it without a terminal event.
    Any write after the stream has ended raises StreamClosedError.
    """

    @property
    def cancelled(self) -> bool: ...

    @property
    def closed(self) -> bool: ...

    def emit(self, event: StreamEvent) -> None: ...

    def close(self) -> None: ...

    def fail(self, message: str) -> None: ...

    def cancel(self) -> None: ...
