"""Chat proxy endpoint.

Validates the conversation and forwards it to the upstream completion API.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import ValidationError

from minichat.api.errors import (
    InvalidMessagesError,
    MissingMessagesError,
    TooManyMessagesError,
    UpstreamFailureError,
)
from minichat.models.schemas import (
    ChatReply,
    ChatRequest,
    ErrorResponse,
    conversation_adapter,
)
from minichat.upstream.client import (
    CompletionService,
    UpstreamError,
    get_completion_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


@router.post(
    "/chat",
    response_model=ChatReply,
    responses={
        400: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def chat(
    payload: ChatRequest | None = None,
    service: CompletionService = Depends(get_completion_service),
) -> ChatReply:
    """Forward a conversation and return the assistant's reply.

    Args:
        payload: The conversation payload. May be absent.
        service: Upstream completion service.

    Returns:
        ChatReply wrapping the first choice's message.

    Raises:
        400: Missing messages, or more than the configured maximum.
        422: A message has an unknown role or non-text content. Checked
             only after the presence and length checks.
        500: The upstream call failed.
    """
    raw_messages = payload.messages if payload is not None else None
    if raw_messages is None:
        logger.warning("Rejected chat request: missing messages")
        raise MissingMessagesError()

    if len(raw_messages) > service.config.max_messages:
        logger.warning(f"Rejected chat request: {len(raw_messages)} messages")
        raise TooManyMessagesError()

    try:
        messages = conversation_adapter.validate_python(raw_messages)
    except ValidationError as e:
        error = InvalidMessagesError.from_validation(e)
        logger.warning(f"Rejected chat request: {error.message}")
        raise error from e

    try:
        reply = await service.complete(messages)
    except UpstreamError as e:
        raise UpstreamFailureError.from_upstream(e) from e

    return ChatReply(reply=reply)
