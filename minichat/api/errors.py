"""Error types for the chat proxy and their JSON rendering.

Every failure leaves the API as ``{"error": <message>}``.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from minichat.upstream.client import UpstreamError

logger = logging.getLogger(__name__)


class ChatAPIError(Exception):
    """Base class for errors reported to the chat client."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingMessagesError(ChatAPIError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self) -> None:
        super().__init__("Missing messages")


class TooManyMessagesError(ChatAPIError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self) -> None:
        super().__init__("Too many messages")


class InvalidMessagesError(ChatAPIError):
    """A message has an unknown role or non-text content."""

    status_code = 422

    @classmethod
    def from_validation(cls, exc: ValidationError) -> "InvalidMessagesError":
        return cls(summarize_errors(exc.errors(), prefix="messages"))


class UpstreamFailureError(ChatAPIError):
    """The upstream call failed; carries the underlying error text."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    @classmethod
    def from_upstream(cls, exc: UpstreamError) -> "UpstreamFailureError":
        return cls(str(exc))


MAX_REPORTED_ERRORS = 3


def summarize_errors(errors: Sequence[Mapping[str, Any]], prefix: str = "") -> str:
    """Flatten pydantic validation errors into one short line.

    Only the first MAX_REPORTED_ERRORS entries are spelled out.
    """
    parts = []
    for err in errors[:MAX_REPORTED_ERRORS]:
        loc = ".".join(str(p) for p in (prefix, *err.get("loc", ())) if p not in ("", "body"))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    if len(errors) > MAX_REPORTED_ERRORS:
        parts.append(f"and {len(errors) - MAX_REPORTED_ERRORS} more")
    return "; ".join(parts) or "Invalid request"


async def chat_api_error_handler(request: Request, exc: ChatAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = summarize_errors(exc.errors())
    logger.warning(f"Rejected request to {request.url.path}: {message}")
    return JSONResponse(
        status_code=422,
        content={"error": message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to an application."""
    app.add_exception_handler(ChatAPIError, chat_api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
