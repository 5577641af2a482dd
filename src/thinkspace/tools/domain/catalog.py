"""ToolCatalog Protocol — the read side of the tool registry used by the step loop."""

from typing import Any, Protocol

from thinkspace.tools.domain.descriptor import ToolDescriptor
from thinkspace.tools.domain.inputs import ToolInput


class ToolCatalog(Protocol):
    def descriptors(self) -> list[ToolDescriptor]: ...

    def resolve(self, name: str) -> ToolDescriptor: ...

    def validate(self, name: str, raw_arguments: Any) -> ToolInput: ...
