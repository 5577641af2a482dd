"""Adapter boundary — turns adapter exceptions into failed ToolResults.

Nothing raised by an adapter crosses this boundary. Authorization failures
keep their "not found or unauthorized" message; every other failure is
reported to the model as a generic "Failed to <action>" and logged in full.
"""

import time

from thinkspace.tools.domain.descriptor import ToolExecute
from thinkspace.tools.domain.inputs import ToolInput
from thinkspace.tools.domain.observer import ToolObserver
from thinkspace.tools.domain.result import ToolFailure, ToolResult
from thinkspace.tools.infrastructure.errors import (
    AdapterExecutionError,
    UnauthorizedResourceError,
)


def guard(
    tool_name: str, action: str, execute: ToolExecute, observer: ToolObserver
) -> ToolExecute:
    """Wrap an adapter's execute function so that it always returns a ToolResult."""

    async def guarded(user_id: str, tool_input: ToolInput) -> ToolResult:
        observer.tool_execution_started(tool_name=tool_name, user_id=user_id)
        start = time.monotonic()
        try:
            result = await execute(user_id, tool_input)
        except UnauthorizedResourceError as exc:
            observer.tool_access_denied(
                tool_name=tool_name, user_id=user_id, resource=exc.resource
            )
            result = ToolFailure(error=exc.public_message)
        except Exception as exc:
            error = AdapterExecutionError(
                tool_name=tool_name, action=action, reason=str(exc)
            )
            observer.tool_execution_failed(
                tool_name=tool_name, user_id=user_id, reason=str(error)
            )
            result = ToolFailure(error=error.public_message)

        duration_ms = int((time.monotonic() - start) * 1000)
        observer.tool_execution_completed(
            tool_name=tool_name,
            user_id=user_id,
            success=result.success,
            duration_ms=duration_ms,
        )
        return result

    return guarded
