"""ToolResult — the tagged success/failure union returned by every tool adapter."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class ToolSuccess(BaseModel, frozen=True):
    success: Literal[True] = True
    payload: dict[str, Any] = Field(default_factory=dict)


class ToolFailure(BaseModel, frozen=True):
    success: Literal[False] = False
    error: str


type ToolResult = ToolSuccess | ToolFailure
