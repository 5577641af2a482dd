"""Step loop states and termination reasons."""

from enum import StrEnum


class LoopState(StrEnum):
    AWAITING_MODEL = "awaiting_model"
    MODEL_RESPONDING = "model_responding"
    TOOL_REQUESTED = "tool_requested"
    TOOL_EXECUTING = "tool_executing"
    TOOL_RESOLVED = "tool_resolved"
    TERMINATED = "terminated"


class TerminationReason(StrEnum):
    COMPLETED = "completed"
    STEP_BUDGET_EXHAUSTED = "step_budget_exhausted"
    UPSTREAM_ERROR = "upstream_error"
    CANCELLED = "cancelled"
