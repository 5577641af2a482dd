"""Error types raised by generation infrastructure."""

from thinkspace.core.errors import ThinkSpaceError


class UpstreamGenerationError(ThinkSpaceError):
    """Raised when the language model provider fails or its stream breaks."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to generate response: {reason}")
