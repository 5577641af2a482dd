"""SessionResolver Protocol — maps a bearer token to the id of the user it belongs to."""

from typing import Protocol


class SessionResolver(Protocol):
    async def resolve(self, token: str | None) -> str:
        """Return the user id for token.

        Raises:
            AuthenticationError: if token is missing or not recognised.
        """
        ...
