"""Step loop configuration model."""

from pydantic import BaseModel, Field


class OrchestrationConfig(BaseModel, frozen=True):
    """Bounds applied to every conversation turn."""

    step_budget: int = Field(default=5, ge=1)
    history_window: int = Field(default=10, ge=1)
