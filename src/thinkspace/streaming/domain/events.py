"""StreamEvent — the events written to a client during one turn.

Wire field names are camelCase; the ``type`` field is the discriminator.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from thinkspace.tools.domain.result import ToolFailure, ToolSuccess


class _Event(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class TextDeltaEvent(_Event):
    type: Literal["text-delta"] = "text-delta"
    text: str


class ToolRequestedEvent(_Event):
    type: Literal["tool-requested"] = "tool-requested"
    call_id: str
    tool_name: str
    arguments: dict[str, Any] | str


class ToolResultEvent(_Event):
    type: Literal["tool-result"] = "tool-result"
    call_id: str
    tool_name: str
    result: ToolSuccess | ToolFailure


class DoneEvent(_Event):
    type: Literal["done"] = "done"


class ErrorEvent(_Event):
    type: Literal["error"] = "error"
    message: str


type StreamEvent = (
    TextDeltaEvent | ToolRequestedEvent | ToolResultEvent | DoneEvent | ErrorEvent
)
