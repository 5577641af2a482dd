"""Language model configuration model."""

from pydantic import BaseModel, Field


class ModelConfig(BaseModel, frozen=True):
    name: str = Field(min_length=1)
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    api_base: str | None = None
    timeout: float = Field(default=60.0, gt=0)
