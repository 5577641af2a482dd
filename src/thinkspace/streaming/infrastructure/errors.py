"""Error types raised by stream sinks."""

from thinkspace.core.errors import ThinkSpaceError


class StreamClosedError(ThinkSpaceError):
    """Raised when an event is written after the stream has ended."""

    def __init__(self, event_type: str) -> None:
        self.event_type = event_type
        super().__init__(f"Failed to emit '{event_type}' event: stream already ended")
