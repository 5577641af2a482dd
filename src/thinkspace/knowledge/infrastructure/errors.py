"""Error types raised by knowledge infrastructure."""

from pathlib import Path

from thinkspace.core.errors import ThinkSpaceError


class RecordNotFoundError(ThinkSpaceError):
    """Raised by a store when a write targets a record that does not exist."""

    def __init__(self, kind: str, record_id: str) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"Failed to write {kind}: no record with id '{record_id}'")


class SeedLoadError(ThinkSpaceError):
    """Raised when the knowledge seed file is missing or malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to load knowledge seed {path}: {reason}")
