"""StepLoopController — drives the model through bounded reasoning and tool-call steps."""

import json
import time
from typing import Any

from thinkspace.core.errors import ThinkSpaceError
from thinkspace.generation.domain.messages import ChatMessage, MessageRole, ToolCall
from thinkspace.generation.domain.model import LanguageModel
from thinkspace.generation.domain.step import (
    TextDelta,
    ToolInvocationRequest,
    new_call_id,
)
from thinkspace.orchestration.domain.observer import OrchestrationObserver
from thinkspace.orchestration.domain.state import LoopState, TerminationReason
from thinkspace.orchestration.domain.transcript import (
    StepRecord,
    ToolInvocation,
    TurnTranscript,
)
from thinkspace.streaming.domain.events import (
    TextDeltaEvent,
    ToolRequestedEvent,
    ToolResultEvent,
)
from thinkspace.streaming.domain.sink import EventSink
from thinkspace.tools.domain.catalog import ToolCatalog
from thinkspace.tools.domain.result import ToolFailure, ToolResult

UPSTREAM_FAILURE_MESSAGE = "Failed to generate a response. Please try again."


def _arguments_for_event(raw_arguments: str | dict[str, Any]) -> dict[str, Any] | str:
    """Decode JSON-string arguments for display; keep undecodable text as-is."""
    if isinstance(raw_arguments, dict):
        return raw_arguments
    try:
        decoded = json.loads(raw_arguments) if raw_arguments.strip() else {}
    except json.JSONDecodeError:
        return raw_arguments
    return decoded if isinstance(decoded, dict) else raw_arguments


def _arguments_json(raw_arguments: str | dict[str, Any]) -> str:
    if isinstance(raw_arguments, str):
        return raw_arguments
    return json.dumps(raw_arguments)


class StepLoopController:
    """Runs one turn of the agent loop against an event sink.

    Each step is one model call. Tool requests from a step are validated,
    executed one at a time in emission order, and fed back to the model as tool
    observations before the next step. The loop ends when a step makes no tool
    requests, when the step budget is spent, when the model fails, or when
    the client goes away.

    The controller holds no per-turn state and may be shared across turns.
    """

    def __init__(
        self,
        model: LanguageModel,
        catalog: ToolCatalog,
        observer: OrchestrationObserver,
        step_budget: int = 5,
    ) -> None:
        if step_budget < 1:
            raise ValueError("step_budget must be at least 1")
        self._model = model
        self._catalog = catalog
        self._observer = observer
        self._step_budget = step_budget

    async def run(
        self, user_id: str, messages: list[ChatMessage], sink: EventSink
    ) -> TurnTranscript:
        """Run the loop for one turn and return its transcript.

        Ends the sink with done on completion or budget exhaustion and with
        error on upstream failure. A cancelled sink is left untouched.
        """
        self._observer.turn_started(user_id=user_id, message_count=len(messages))
        start = time.monotonic()

        context = list(messages)
        tools = self._catalog.descriptors()
        seen_call_ids: set[str] = set()
        steps: list[StepRecord] = []
        reason = TerminationReason.STEP_BUDGET_EXHAUSTED

        for index in range(1, self._step_budget + 1):
            if sink.cancelled:
                reason = TerminationReason.CANCELLED
                break

            self._observer.loop_state_changed(
                user_id=user_id, step=index, state=LoopState.AWAITING_MODEL
            )
            text_parts: list[str] = []
            requests: list[ToolInvocationRequest] = []
            try:
                self._observer.loop_state_changed(
                    user_id=user_id, step=index, state=LoopState.MODEL_RESPONDING
                )
                async for chunk in self._model.generate_step(context, tools):
                    if sink.cancelled:
                        break
                    if isinstance(chunk, TextDelta):
                        text_parts.append(chunk.text)
                        sink.emit(TextDeltaEvent(text=chunk.text))
                    else:
                        if chunk.call_id in seen_call_ids:
                            chunk = chunk.model_copy(update={"call_id": new_call_id()})
                        seen_call_ids.add(chunk.call_id)
                        requests.append(chunk)
            except ThinkSpaceError as exc:
                self._observer.upstream_failed(user_id=user_id, step=index, reason=str(exc))
                steps.append(StepRecord(index=index, text="".join(text_parts)))
                if not sink.cancelled:
                    sink.fail(UPSTREAM_FAILURE_MESSAGE)
                reason = TerminationReason.UPSTREAM_ERROR
                break

            text = "".join(text_parts)
            if sink.cancelled:
                steps.append(StepRecord(index=index, text=text))
                reason = TerminationReason.CANCELLED
                break

            if requests:
                context.append(
                    ChatMessage(
                        role=MessageRole.ASSISTANT,
                        content=text,
                        tool_calls=[
                            ToolCall(
                                call_id=r.call_id,
                                tool_name=r.tool_name,
                                arguments=_arguments_json(r.raw_arguments),
                            )
                            for r in requests
                        ],
                    )
                )

            invocations: list[ToolInvocation] = []
            for request in requests:
                if sink.cancelled:
                    break
                result = await self._invoke(
                    user_id=user_id, step=index, request=request, sink=sink
                )
                invocations.append(ToolInvocation(request=request, result=result))
                context.append(
                    ChatMessage(
                        role=MessageRole.TOOL,
                        tool_call_id=request.call_id,
                        content=result.model_dump_json(),
                    )
                )

            steps.append(StepRecord(index=index, text=text, invocations=invocations))
            if sink.cancelled:
                reason = TerminationReason.CANCELLED
                break
            if not requests:
                reason = TerminationReason.COMPLETED
                break

        if reason in (TerminationReason.COMPLETED, TerminationReason.STEP_BUDGET_EXHAUSTED):
            sink.close()

        self._observer.loop_state_changed(
            user_id=user_id, step=len(steps), state=LoopState.TERMINATED
        )
        self._observer.turn_terminated(
            user_id=user_id,
            steps=len(steps),
            reason=reason,
            duration_ms=int((time.monotonic() - start) * 1000),
        )
        return TurnTranscript(steps=steps, termination_reason=reason)

    async def _invoke(
        self,
        user_id: str,
        step: int,
        request: ToolInvocationRequest,
        sink: EventSink,
    ) -> ToolResult:
        """Validate and execute one request, streaming its requested/result events."""
        self._observer.loop_state_changed(
            user_id=user_id, step=step, state=LoopState.TOOL_REQUESTED
        )
        sink.emit(
            ToolRequestedEvent(
                call_id=request.call_id,
                tool_name=request.tool_name,
                arguments=_arguments_for_event(request.raw_arguments),
            )
        )

        result: ToolResult
        try:
            tool_input = self._catalog.validate(request.tool_name, request.raw_arguments)
        except ThinkSpaceError as exc:
            self._observer.tool_rejected(
                user_id=user_id,
                call_id=request.call_id,
                tool_name=request.tool_name,
                reason=str(exc),
            )
            result = ToolFailure(error=str(exc))
        else:
            self._observer.loop_state_changed(
                user_id=user_id, step=step, state=LoopState.TOOL_EXECUTING
            )
            descriptor = self._catalog.resolve(request.tool_name)
            result = await descriptor.execute(user_id, tool_input)

        self._observer.loop_state_changed(
            user_id=user_id, step=step, state=LoopState.TOOL_RESOLVED
        )
        if not sink.cancelled:
            sink.emit(
                ToolResultEvent(
                    call_id=request.call_id, tool_name=request.tool_name, result=result
                )
            )
        return result
