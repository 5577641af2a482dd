"""TurnTranscript — the audit trail of one turn."""

from pydantic import BaseModel, Field

from thinkspace.generation.domain.step import ToolInvocationRequest
from thinkspace.orchestration.domain.state import TerminationReason
from thinkspace.tools.domain.result import ToolFailure, ToolSuccess


class ToolInvocation(BaseModel, frozen=True):
    """One tool request paired with the result it produced."""

    request: ToolInvocationRequest
    result: ToolSuccess | ToolFailure


class StepRecord(BaseModel, frozen=True):
    """One loop iteration: the model's text plus the tool calls it made."""

    index: int = Field(ge=1)
    text: str = ""
    invocations: list[ToolInvocation] = Field(default_factory=list)


class TurnTranscript(BaseModel, frozen=True):
    steps: list[StepRecord]
    termination_reason: TerminationReason

    @property
    def invocations(self) -> list[ToolInvocation]:
        return [inv for step in self.steps for inv in step.invocations]

    @property
    def text(self) -> str:
        return "".join(step.text for step in self.steps)
