"""Error types raised by the tool registry and adapters."""

from thinkspace.core.errors import ThinkSpaceError


class DuplicateToolError(ThinkSpaceError):
    """Raised when a tool name is registered twice."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Failed to register tool '{tool_name}': name already registered")


class UnknownToolError(ThinkSpaceError):
    """Raised when a tool name has no registered descriptor."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Failed to resolve tool '{tool_name}': no such tool")


class SchemaValidationError(ThinkSpaceError):
    """Raised when tool arguments do not conform to the tool's input schema.

    field_errors maps a dotted field path to its message. Problems with the
    payload as a whole are reported under the "<root>" path.
    """

    ROOT = "<root>"

    def __init__(self, tool_name: str, field_errors: dict[str, str]) -> None:
        self.tool_name = tool_name
        self.field_errors = dict(field_errors)
        details = "; ".join(f"{path}: {msg}" for path, msg in self.field_errors.items())
        super().__init__(f"Failed to validate arguments for tool '{tool_name}': {details}")


class UnauthorizedResourceError(ThinkSpaceError):
    """Raised when a record is absent or owned by someone else.

    The two cases are deliberately indistinguishable. public_message is the
    text handed back to the model.
    """

    def __init__(self, resource: str) -> None:
        self.resource = resource
        self.public_message = f"{resource[:1].upper()}{resource[1:]} not found or unauthorized"
        super().__init__(f"Failed to access {resource}: not found or unauthorized")


class AdapterExecutionError(ThinkSpaceError):
    """Raised when a tool adapter fails for a reason other than authorization.

    public_message carries no detail from the underlying failure.
    """

    def __init__(self, tool_name: str, action: str, reason: str) -> None:
        self.tool_name = tool_name
        self.public_message = f"Failed to {action}"
        super().__init__(f"Failed to {action}: {reason}")
