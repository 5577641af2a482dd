"""Model-facing message list types."""

from enum import StrEnum

from pydantic import BaseModel, Field


class MessageRole(StrEnum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class ToolCall(BaseModel, frozen=True):
    """A tool call the assistant made, as recorded in the message history.

    arguments is the JSON-encoded argument object.
    """

    call_id: str
    tool_name: str
    arguments: str


class ChatMessage(BaseModel, frozen=True):
    """One entry of the message list sent to the language model.

    Assistant messages may carry tool_calls; tool messages carry the
    tool_call_id they answer and the JSON-encoded ToolResult as content.
    """

    role: MessageRole
    content: str = ""
    tool_calls: list[ToolCall] = Field(default_factory=list)
    tool_call_id: str | None = None
