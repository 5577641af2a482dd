"""ToolRegistry — registration, lookup and argument validation for tools."""

import json
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from thinkspace.tools.domain.descriptor import ToolDescriptor
from thinkspace.tools.domain.inputs import ToolInput
from thinkspace.tools.domain.observer import ToolObserver
from thinkspace.tools.infrastructure.errors import (
    DuplicateToolError,
    SchemaValidationError,
    UnknownToolError,
)


def _field_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"]) or SchemaValidationError.ROOT
        errors.setdefault(path, error["msg"])
    return errors


def _decode_arguments(tool_name: str, raw_arguments: Any) -> Mapping[str, Any]:
    if raw_arguments is None:
        return {}
    if isinstance(raw_arguments, str):
        if not raw_arguments.strip():
            return {}
        try:
            raw_arguments = json.loads(raw_arguments)
        except json.JSONDecodeError as exc:
            raise SchemaValidationError(
                tool_name=tool_name,
                field_errors={SchemaValidationError.ROOT: f"arguments are not valid JSON: {exc.msg}"},
            ) from exc
    if not isinstance(raw_arguments, Mapping):
        raise SchemaValidationError(
            tool_name=tool_name,
            field_errors={SchemaValidationError.ROOT: "arguments must be a JSON object"},
        )
    return raw_arguments


class ToolRegistry:
    """Holds every ToolDescriptor, keyed by unique name, in registration order.

    Populated once at startup and read-only afterwards.
    """

    def __init__(self, observer: ToolObserver) -> None:
        self._observer = observer
        self._descriptors: dict[str, ToolDescriptor] = {}

    def register(self, descriptor: ToolDescriptor) -> None:
        """Add a descriptor.

        Raises:
            DuplicateToolError: if a tool with the same name is already registered.
        """
        if descriptor.name in self._descriptors:
            raise DuplicateToolError(tool_name=descriptor.name)
        self._descriptors[descriptor.name] = descriptor
        self._observer.tool_registered(tool_name=descriptor.name)

    def resolve(self, name: str) -> ToolDescriptor:
        """Return the descriptor registered under name.

        Raises:
            UnknownToolError: if nothing is registered under name.
        """
        try:
            return self._descriptors[name]
        except KeyError:
            raise UnknownToolError(tool_name=name) from None

    def validate(self, name: str, raw_arguments: Any) -> ToolInput:
        """Validate raw model-supplied arguments against the tool's input schema.

        raw_arguments may be a mapping or a JSON-encoded string. None and the
        empty string are read as an empty object.

        Raises:
            UnknownToolError: if nothing is registered under name.
            SchemaValidationError: if the arguments do not conform.
        """
        descriptor = self.resolve(name)
        arguments = _decode_arguments(tool_name=name, raw_arguments=raw_arguments)
        try:
            return descriptor.input_model.model_validate(arguments)
        except ValidationError as exc:
            raise SchemaValidationError(
                tool_name=name, field_errors=_field_errors(exc)
            ) from exc

    def descriptors(self) -> list[ToolDescriptor]:
        return list(self._descriptors.values())

    def __contains__(self, name: object) -> bool:
        return name in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)
