from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Role(str, Enum):
    """Speaker of a message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single role-tagged message in the conversation.

    Messages are immutable once created; a conversation only ever grows
    by appending new ones.

    Attributes:
        role: The speaker (system, user, or assistant).
        content: The message text.
    """

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    role: Role
    content: str = Field(..., strict=True)


class ChatRequest(BaseModel):
    """Request payload for the chat proxy endpoint.

    ``messages`` is accepted loosely here. The endpoint checks presence and
    length first, then validates each entry with ``conversation_adapter``.

    Attributes:
        messages: The full conversation, oldest message first.
    """

    messages: list[Any] | None = None


class ChatReply(BaseModel):
    """Successful proxy response.

    Attributes:
        reply: The assistant message produced by the upstream model.
    """

    reply: Message


class ErrorResponse(BaseModel):
    """Body returned for every failed request.

    Attributes:
        error: Human-readable error text.
    """

    error: str


conversation_adapter = TypeAdapter(list[Message])
