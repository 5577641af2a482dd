"""Base exception class for all ThinkSpace-specific errors."""


class ThinkSpaceError(Exception):
    """Base class for all ThinkSpace errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
