"""ToolDisplay — what a rendering layer shows for one tool call."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel


class DisplayStatus(StrEnum):
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


class ToolDisplay(BaseModel, frozen=True):
    """Pending (no output yet), success with canonical data, or failure with an error."""

    tool_name: str
    status: DisplayStatus
    data: dict[str, Any] | None = None
    error: str | None = None
