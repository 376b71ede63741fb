"""Pydantic models for API requests and responses.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Role: Fixed set of conversation roles
    - Message: Individual message in a conversation
    - ChatRequest: Incoming conversation payload
    - ChatReply: Outgoing assistant reply
    - ErrorResponse: Error body shared by all failures
"""

from minichat.models.schemas import (
    ChatReply,
    ChatRequest,
    ErrorResponse,
    Message,
    Role,
)

__all__ = ["ChatReply", "ChatRequest", "ErrorResponse", "Message", "Role"]
