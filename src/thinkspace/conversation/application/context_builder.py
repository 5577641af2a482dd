"""ContextBuilder — assembles the model message list for one turn."""

from thinkspace.conversation.domain.prompt import ContextOptions, render_system_prompt
from thinkspace.conversation.domain.turn import ConversationTurn, TurnRole
from thinkspace.generation.domain.messages import ChatMessage, MessageRole

_ROLE_MAP = {
    TurnRole.USER: MessageRole.USER,
    TurnRole.ASSISTANT: MessageRole.ASSISTANT,
}


class ContextBuilder:
    """Builds [system, *recent turns] for the language model.

    Client-supplied system turns are dropped so that the rendered system
    instruction is the only one. The history window counts user and
    assistant turns only.
    """

    def __init__(self, history_window: int = 10) -> None:
        if history_window < 1:
            raise ValueError("history_window must be at least 1")
        self._history_window = history_window

    def build(
        self, prior_turns: list[ConversationTurn], options: ContextOptions
    ) -> list[ChatMessage]:
        conversational = [t for t in prior_turns if t.role in _ROLE_MAP]
        recent = conversational[-self._history_window :]

        messages = [
            ChatMessage(role=MessageRole.SYSTEM, content=render_system_prompt(options))
        ]
        messages.extend(
            ChatMessage(role=_ROLE_MAP[turn.role], content=turn.content) for turn in recent
        )
        return messages
