"""StaticTokenSessionResolver — bearer tokens configured up front, for development."""

import hmac

from thinkspace.auth.infrastructure.errors import AuthenticationError


class StaticTokenSessionResolver:
    """Resolves tokens against a fixed token-to-user mapping.

    Every configured token is compared in constant time.

    Satisfies the SessionResolver protocol structurally.
    """

    def __init__(self, tokens: dict[str, str]) -> None:
        self._tokens = dict(tokens)

    async def resolve(self, token: str | None) -> str:
        if not token:
            raise AuthenticationError(reason="no token provided")

        user_id: str | None = None
        for known, owner in self._tokens.items():
            if hmac.compare_digest(known.encode(), token.encode()):
                user_id = owner
        if user_id is None:
            raise AuthenticationError(reason="unknown token")
        return user_id
