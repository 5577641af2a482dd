"""ToolDescriptor — the registered contract of one invocable tool."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from thinkspace.tools.domain.inputs import ToolInput
from thinkspace.tools.domain.result import ToolResult

type ToolExecute = Callable[[str, Any], Awaitable[ToolResult]]


@dataclass(frozen=True)
class ToolDescriptor:
    """Name, description, input schema, and execution function of one tool.

    execute receives the caller's user id and an instance of input_model that
    has already passed validation. It must never raise.
    """

    name: str
    description: str
    input_model: type[ToolInput]
    execute: ToolExecute

    @property
    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema(by_alias=True)
