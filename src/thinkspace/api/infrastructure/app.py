"""FastAPI application exposing the chat stream as Server-Sent Events."""

import asyncio
from collections.abc import AsyncIterator

from fastapi import Depends, FastAPI, Header, HTTPException, Request
from fastapi.responses import StreamingResponse

from thinkspace.api.domain.observer import ApiObserver
from thinkspace.api.domain.requests import ChatStreamRequest
from thinkspace.auth.domain.resolver import SessionResolver
from thinkspace.auth.infrastructure.errors import AuthenticationError
from thinkspace.orchestration.application.turn_service import ChatTurnService
from thinkspace.streaming.infrastructure.queue_sink import QueueEventSink, open_stream
from thinkspace.streaming.infrastructure.sse import encode_sse

STREAM_PATH = "/api/chat/stream"


def _sse_headers() -> dict[str, str]:
    return {"Cache-Control": "no-cache", "X-Accel-Buffering": "no"}


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def create_app(
    service: ChatTurnService,
    resolver: SessionResolver,
    observer: ApiObserver,
) -> FastAPI:
    """Build the HTTP application around an already-wired ChatTurnService."""
    app = FastAPI(title="ThinkSpace Chat")
    # Strong references to in-flight turns; asyncio only keeps weak ones.
    app.state.turns = set()

    async def authenticate(authorization: str | None = Header(default=None)) -> str:
        try:
            return await resolver.resolve(_bearer_token(authorization))
        except AuthenticationError as exc:
            observer.request_unauthorized(path=STREAM_PATH, reason=str(exc))
            raise HTTPException(status_code=401, detail="Unauthorized") from exc

    async def event_stream(
        request: Request, sink: QueueEventSink, user_id: str
    ) -> AsyncIterator[str]:
        count = 0
        try:
            async for event in sink:
                if await request.is_disconnected():
                    sink.cancel()
                    break
                count += 1
                yield encode_sse(event)
        finally:
            if not sink.closed:
                sink.cancel()
            observer.stream_finished(
                user_id=user_id, event_count=count, cancelled=sink.cancelled
            )

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post(STREAM_PATH)
    async def chat_stream(
        payload: ChatStreamRequest,
        request: Request,
        user_id: str = Depends(authenticate),
    ) -> StreamingResponse:
        sink = open_stream()
        task = asyncio.create_task(
            service.run_turn(
                user_id=user_id,
                turns=payload.messages,
                options=payload.context_options(),
                sink=sink,
            )
        )
        app.state.turns.add(task)
        task.add_done_callback(app.state.turns.discard)

        observer.stream_opened(user_id=user_id, turn_count=len(payload.messages))
        return StreamingResponse(
            event_stream(request=request, sink=sink, user_id=user_id),
            media_type="text/event-stream",
            headers=_sse_headers(),
        )

    return app
