"""Owner checks shared by the adapters that touch an owned record."""

from typing import Protocol

from thinkspace.tools.infrastructure.errors import UnauthorizedResourceError


class Owned(Protocol):
    @property
    def owner_id(self) -> str: ...


def require_owned[T: Owned](record: T | None, user_id: str, resource: str) -> T:
    """Return record if it exists and belongs to user_id.

    Raises:
        UnauthorizedResourceError: if record is None or owned by another user.
    """
    if record is None or record.owner_id != user_id:
        raise UnauthorizedResourceError(resource=resource)
    return record
