"""Server-Sent Events encoding of StreamEvents."""

import json

from thinkspace.streaming.domain.events import StreamEvent


def encode_sse(event: StreamEvent) -> str:
    """Encode one event as an SSE frame: ``event: <type>``, ``data: <json>``, blank line."""
    data = json.dumps(event.to_wire(), separators=(",", ":"), ensure_ascii=False)
    return f"event: {event.type}\ndata: {data}\n\n"
