"""Chunks of one streamed model step."""

import uuid
from typing import Any

from pydantic import BaseModel, Field, field_validator


def new_call_id() -> str:
    return f"call_{uuid.uuid4().hex[:24]}"


class TextDelta(BaseModel, frozen=True):
    text: str


class ToolInvocationRequest(BaseModel, frozen=True):
    """A tool call requested by the model.

    raw_arguments is passed through untouched: a JSON string or an already
    decoded mapping. A missing or empty call_id is replaced with a generated one.
    """

    call_id: str = Field(default_factory=new_call_id)
    tool_name: str
    raw_arguments: str | dict[str, Any] = Field(default_factory=dict)

    @field_validator("call_id", mode="before")
    @classmethod
    def _generate_missing_call_id(cls, value: object) -> object:
        if value is None or value == "":
            return new_call_id()
        return value


type StepChunk = TextDelta | ToolInvocationRequest
