"""ScriptedLanguageModel — in-memory LanguageModel implementation for use in tests."""

import asyncio
from collections.abc import AsyncIterator

from thinkspace.generation.domain.messages import ChatMessage
from thinkspace.generation.domain.step import StepChunk
from thinkspace.tools.domain.descriptor import ToolDescriptor


class ScriptedLanguageModel:
    """Satisfies the LanguageModel protocol. Plays back one scripted step per call.

    Each step is a list of chunks. An Exception in the list is raised at that
    point of the stream, after the chunks before it were yielded. Once the
    script is exhausted every further call yields default_step. A positive
    delay is awaited before each chunk.

    Every call records a copy of the message list it was given.
    """

    def __init__(
        self,
        steps: list[list[StepChunk | Exception]],
        default_step: list[StepChunk | Exception] | None = None,
        delay: float = 0.0,
    ) -> None:
        self._steps = list(steps)
        self._default_step = default_step if default_step is not None else []
        self._delay = delay
        self.calls: list[list[ChatMessage]] = []
        self.offered_tools: list[list[str]] = []

    async def generate_step(
        self, messages: list[ChatMessage], tools: list[ToolDescriptor]
    ) -> AsyncIterator[StepChunk]:
        self.calls.append(list(messages))
        self.offered_tools.append([d.name for d in tools])
        step = self._steps.pop(0) if self._steps else self._default_step
        for chunk in step:
            if self._delay:
                await asyncio.sleep(self._delay)
            if isinstance(chunk, Exception):
                raise chunk
            yield chunk
