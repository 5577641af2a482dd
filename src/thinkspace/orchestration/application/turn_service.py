"""ChatTurnService — builds the context for a turn and runs the step loop on it."""

from thinkspace.conversation.application.context_builder import ContextBuilder
from thinkspace.conversation.domain.prompt import ContextOptions
from thinkspace.conversation.domain.turn import ConversationTurn
from thinkspace.orchestration.application.step_loop import StepLoopController
from thinkspace.orchestration.domain.observer import OrchestrationObserver
from thinkspace.orchestration.domain.transcript import TurnTranscript
from thinkspace.streaming.domain.sink import EventSink

UNEXPECTED_FAILURE_MESSAGE = "Failed to process chat request"


class ChatTurnService:
    """Entry point for one user turn, from prior turns to a finished stream.

    run_turn is meant to be the body of a background task: it never raises,
    and it always leaves the sink ended.
    """

    def __init__(
        self,
        context_builder: ContextBuilder,
        controller: StepLoopController,
        observer: OrchestrationObserver,
    ) -> None:
        self._context_builder = context_builder
        self._controller = controller
        self._observer = observer

    async def run_turn(
        self,
        user_id: str,
        turns: list[ConversationTurn],
        options: ContextOptions,
        sink: EventSink,
    ) -> TurnTranscript | None:
        messages = self._context_builder.build(prior_turns=turns, options=options)
        try:
            return await self._controller.run(
                user_id=user_id, messages=messages, sink=sink
            )
        except Exception as exc:
            self._observer.turn_crashed(user_id=user_id, reason=repr(exc))
            if not sink.closed:
                sink.fail(UNEXPECTED_FAILURE_MESSAGE)
            return None
