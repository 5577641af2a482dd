"""Authentication configuration model."""

from pydantic import BaseModel, Field

type BearerToken = str
type UserId = str


class AuthConfig(BaseModel, frozen=True):
    """Static bearer tokens mapped to the user identity they authenticate."""

    tokens: dict[BearerToken, UserId] = Field(default_factory=dict)
