"""Tests for the chat stream request body."""

import pytest
from pydantic import ValidationError

from thinkspace.api.domain.requests import ChatStreamRequest
from thinkspace.conversation.domain.turn import TurnRole
from thinkspace.knowledge.domain.category import ParaCategory


class TestChatStreamRequest:
    def test_parses_camel_case_body(self) -> None:
        request = ChatStreamRequest.model_validate(
            {
                "messages": [
                    {"role": "user", "content": "hi", "createdAt": "2026-01-01T00:00:00Z"}
                ],
                "category": "resource",
                "context": {"projectTitle": "Launch site"},
            }
        )

        assert request.messages[0].role == TurnRole.USER
        options = request.context_options()
        assert options.category == ParaCategory.RESOURCE
        assert options.project_title == "Launch site"
        assert options.note_title is None

    def test_context_is_optional(self) -> None:
        request = ChatStreamRequest.model_validate(
            {"messages": [{"role": "user", "content": "hi"}]}
        )

        assert request.context_options().project_title is None

    def test_empty_messages_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ChatStreamRequest.model_validate({"messages": []})

    def test_unknown_role_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ChatStreamRequest.model_validate(
                {"messages": [{"role": "tool", "content": "x"}]}
            )
