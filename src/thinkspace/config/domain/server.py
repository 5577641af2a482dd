"""HTTP server configuration model."""

from pydantic import BaseModel, Field


class ServerConfig(BaseModel, frozen=True):
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
