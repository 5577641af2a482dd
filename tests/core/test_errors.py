"""Tests verifying the ThinkSpaceError type hierarchy."""

from pathlib import Path

from thinkspace.auth.infrastructure.errors import AuthenticationError
from thinkspace.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from thinkspace.core.errors import ThinkSpaceError
from thinkspace.generation.infrastructure.errors import UpstreamGenerationError
from thinkspace.knowledge.infrastructure.errors import RecordNotFoundError, SeedLoadError
from thinkspace.streaming.infrastructure.errors import StreamClosedError
from thinkspace.tools.infrastructure.errors import (
    AdapterExecutionError,
    DuplicateToolError,
    SchemaValidationError,
    UnauthorizedResourceError,
    UnknownToolError,
)

_ALL_ERRORS: list[ThinkSpaceError] = [
    MissingEnvVarsError(missing_vars=["MY_VAR"]),
    ConfigValidationError(reason="bad value"),
    ConfigLoadError(path=Path("/some/config.yaml")),
    RecordNotFoundError(kind="project", record_id="p1"),
    SeedLoadError(path=Path("/some/seed.yaml"), reason="file not found"),
    DuplicateToolError(tool_name="search_notes"),
    UnknownToolError(tool_name="nope"),
    SchemaValidationError(tool_name="search_notes", field_errors={"query": "required"}),
    UnauthorizedResourceError(resource="project"),
    AdapterExecutionError(tool_name="create_project", action="create project", reason="x"),
    UpstreamGenerationError(reason="timeout"),
    StreamClosedError(event_type="done"),
    AuthenticationError(reason="unknown token"),
]


class TestThinkSpaceErrorHierarchy:
    """All ThinkSpace-specific exceptions inherit from ThinkSpaceError."""

    def test_every_error_is_a_thinkspace_error(self) -> None:
        for error in _ALL_ERRORS:
            assert isinstance(error, ThinkSpaceError)

    def test_messages_start_with_failed_to(self) -> None:
        for error in _ALL_ERRORS:
            assert str(error).startswith("Failed to "), type(error).__name__

    def test_thinkspace_error_is_exception(self) -> None:
        assert isinstance(ThinkSpaceError("test"), Exception)


class TestPublicMessages:
    """Errors surfaced to the model carry no internal detail."""

    def test_unauthorized_public_message(self) -> None:
        error = UnauthorizedResourceError(resource="one or both notes")

        assert error.public_message == "One or both notes not found or unauthorized"

    def test_adapter_failure_public_message_hides_reason(self) -> None:
        error = AdapterExecutionError(
            tool_name="create_project",
            action="create project",
            reason="password authentication failed",
        )

        assert error.public_message == "Failed to create project"
        assert "password" in str(error)
