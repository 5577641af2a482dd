"""Error types raised by session resolvers."""

from thinkspace.core.errors import ThinkSpaceError


class AuthenticationError(ThinkSpaceError):
    """Raised when a request carries no usable credentials."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to authenticate request: {reason}")
