"""Unit tests for request/response schemas."""

import pytest
from pydantic import ValidationError

from minichat.models.schemas import (
    ChatReply,
    ChatRequest,
    Message,
    Role,
    conversation_adapter,
)


class TestMessage:
    @pytest.mark.parametrize("role", ["system", "user", "assistant"])
    def test_accepts_known_roles(self, role: str) -> None:
        message = Message(role=role, content="hi")

        assert message.role == role

    def test_rejects_unknown_role(self) -> None:
        with pytest.raises(ValidationError):
            Message(role="tool", content="hi")

    def test_rejects_non_text_content(self) -> None:
        with pytest.raises(ValidationError):
            Message(role="user", content=42)

    def test_requires_content(self) -> None:
        with pytest.raises(ValidationError):
            Message.model_validate({"role": "user"})

    def test_is_immutable(self) -> None:
        message = Message(role=Role.USER, content="hi")

        with pytest.raises(ValidationError):
            message.content = "changed"

    def test_serializes_role_as_string(self) -> None:
        message = Message(role=Role.ASSISTANT, content="Hello!")

        assert message.model_dump() == {"role": "assistant", "content": "Hello!"}


class TestChatRequest:
    def test_messages_default_to_none(self) -> None:
        assert ChatRequest().messages is None

    def test_accepts_any_entries_before_message_checks(self) -> None:
        request = ChatRequest.model_validate({"messages": [{"role": "tool"}, 7]})

        assert request.messages == [{"role": "tool"}, 7]

    def test_conversation_adapter_rejects_bad_entries(self) -> None:
        with pytest.raises(ValidationError):
            conversation_adapter.validate_python([{"role": "tool", "content": "x"}])

    def test_keeps_message_order(self) -> None:
        request = ChatRequest.model_validate(
            {
                "messages": [
                    {"role": "system", "content": "persona"},
                    {"role": "user", "content": "first"},
                    {"role": "assistant", "content": "second"},
                ]
            }
        )
        conversation = conversation_adapter.validate_python(request.messages)

        assert [m.content for m in conversation] == ["persona", "first", "second"]


def test_chat_reply_shape() -> None:
    reply = ChatReply(reply=Message(role=Role.ASSISTANT, content="Hello!"))

    assert reply.model_dump() == {"reply": {"role": "assistant", "content": "Hello!"}}
