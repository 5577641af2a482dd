"""LiteLLMLanguageModel — streamed, tool-calling model steps via LiteLLM."""

import time
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Any

import litellm

from thinkspace.config.domain.model import ModelConfig
from thinkspace.generation.domain.messages import ChatMessage, MessageRole
from thinkspace.generation.domain.observer import GenerationObserver
from thinkspace.generation.domain.step import StepChunk, TextDelta, ToolInvocationRequest
from thinkspace.generation.infrastructure.errors import UpstreamGenerationError
from thinkspace.tools.domain.descriptor import ToolDescriptor


@dataclass
class _PendingToolCall:
    """Tool call fragments accumulated across stream chunks."""

    call_id: str | None = None
    name: str = ""
    arguments: str = ""


def _to_wire_message(message: ChatMessage) -> dict[str, Any]:
    if message.role == MessageRole.TOOL:
        return {
            "role": "tool",
            "tool_call_id": message.tool_call_id,
            "content": message.content,
        }
    wire: dict[str, Any] = {"role": message.role.value, "content": message.content}
    if message.tool_calls:
        wire["content"] = message.content or None
        wire["tool_calls"] = [
            {
                "id": call.call_id,
                "type": "function",
                "function": {"name": call.tool_name, "arguments": call.arguments},
            }
            for call in message.tool_calls
        ]
    return wire


def _to_wire_tool(descriptor: ToolDescriptor) -> dict[str, Any]:
    return {
        "type": "function",
        "function": {
            "name": descriptor.name,
            "description": descriptor.description,
            "parameters": descriptor.input_schema,
        },
    }


class LiteLLMLanguageModel:
    """LanguageModel implementation that streams one completion per step through LiteLLM.

    Tool call deltas are merged by their stream index and yielded after the
    stream ends, in index order.
    """

    def __init__(self, config: ModelConfig, observer: GenerationObserver) -> None:
        self._config = config
        self._observer = observer

    async def generate_step(
        self, messages: list[ChatMessage], tools: list[ToolDescriptor]
    ) -> AsyncIterator[StepChunk]:
        """Stream one model step.

        Raises:
            UpstreamGenerationError: if the call fails or the stream breaks.
        """
        model = self._config.name
        self._observer.generation_started(
            model=model, message_count=len(messages), tool_count=len(tools)
        )

        kwargs: dict[str, Any] = {
            "model": model,
            "temperature": self._config.temperature,
            "messages": [_to_wire_message(m) for m in messages],
            "stream": True,
            "timeout": self._config.timeout,
        }
        if tools:
            kwargs["tools"] = [_to_wire_tool(d) for d in tools]
        if self._config.api_base is not None:
            kwargs["api_base"] = self._config.api_base

        start = time.monotonic()
        text_chars = 0
        pending: dict[int, _PendingToolCall] = {}
        try:
            stream = await litellm.acompletion(**kwargs)
            async for chunk in stream:
                if not chunk.choices:
                    continue
                delta = chunk.choices[0].delta
                if delta.content:
                    text_chars += len(delta.content)
                    yield TextDelta(text=delta.content)
                for fragment in delta.tool_calls or []:
                    index = fragment.index if fragment.index is not None else 0
                    entry = pending.setdefault(index, _PendingToolCall())
                    if fragment.id:
                        entry.call_id = fragment.id
                    if fragment.function is not None:
                        if fragment.function.name:
                            entry.name = fragment.function.name
                        if fragment.function.arguments:
                            entry.arguments += fragment.function.arguments
        except Exception as exc:
            reason = str(exc)
            self._observer.generation_failed(model=model, reason=reason)
            raise UpstreamGenerationError(reason=reason) from exc

        for index in sorted(pending):
            entry = pending[index]
            yield ToolInvocationRequest(
                call_id=entry.call_id,
                tool_name=entry.name,
                raw_arguments=entry.arguments,
            )

        self._observer.generation_completed(
            model=model,
            duration_ms=int((time.monotonic() - start) * 1000),
            text_chars=text_chars,
            tool_calls=len(pending),
        )
