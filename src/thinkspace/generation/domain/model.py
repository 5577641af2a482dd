"""LanguageModel Protocol — structural interface for one streamed generation step."""

from collections.abc import AsyncIterator
from typing import Protocol

from thinkspace.generation.domain.messages import ChatMessage
from thinkspace.generation.domain.step import StepChunk
from thinkspace.tools.domain.descriptor import ToolDescriptor


class LanguageModel(Protocol):
    """Produces one model step for a message list and the tools on offer.

    Text deltas are yielded as they arrive; tool invocation requests are yielded
    once fully assembled, after the text.

    Raises:
        UpstreamGenerationError: if the provider call fails, before or during
            streaming.
    """

    def generate_step(
        self, messages: list[ChatMessage], tools: list[ToolDescriptor]
    ) -> AsyncIterator[StepChunk]: ...
