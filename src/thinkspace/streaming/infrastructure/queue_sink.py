"""QueueEventSink — an EventSink backed by a single asyncio FIFO queue."""

import asyncio
from collections.abc import AsyncIterator

from thinkspace.streaming.domain.events import DoneEvent, ErrorEvent, StreamEvent
from thinkspace.streaming.infrastructure.errors import StreamClosedError


class QueueEventSink:
    """Writer and reader of one turn's event stream.

    The step loop writes through emit/close/fail; the HTTP layer reads with
    ``async for event in sink``. Reading ends after the terminal event, or
    immediately once the sink is cancelled.

    Satisfies the EventSink protocol structurally.
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue[StreamEvent | None] = asyncio.Queue()
        self._closed = False
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def closed(self) -> bool:
        return self._closed

    def emit(self, event: StreamEvent) -> None:
        """Queue event for delivery.

        Raises:
            StreamClosedError: if the stream has already ended.
        """
        if self._closed:
            raise StreamClosedError(event_type=event.type)
        self._queue.put_nowait(event)

    def close(self) -> None:
        self._finish(DoneEvent())

    def fail(self, message: str) -> None:
        self._finish(ErrorEvent(message=message))

    def cancel(self) -> None:
        """Mark the client as gone. Safe to call more than once."""
        self._cancelled = True
        if not self._closed:
            self._closed = True
            self._queue.put_nowait(None)

    def _finish(self, terminal: StreamEvent) -> None:
        self.emit(terminal)
        self._closed = True
        self._queue.put_nowait(None)

    async def __aiter__(self) -> AsyncIterator[StreamEvent]:
        while True:
            event = await self._queue.get()
            if event is None or self._cancelled:
                return
            yield event


def open_stream() -> QueueEventSink:
    """Open a fresh event stream for one turn."""
    return QueueEventSink()
