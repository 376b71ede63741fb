"""Upstream chat-completion client.

Forwards a conversation to an OpenAI-compatible completion API.

Responsibilities:
    - Client construction from explicit configuration
    - Fixed sampling parameters (model, max tokens, temperature)
    - Wrapping every upstream failure in a single error type

Maintains clean separation from the HTTP layer.
"""

from minichat.upstream.client import (
    CompletionService,
    UpstreamError,
    get_completion_service,
)
from minichat.upstream.config import UpstreamConfig, get_upstream_config

__all__ = [
    "CompletionService",
    "UpstreamConfig",
    "UpstreamError",
    "get_completion_service",
    "get_upstream_config",
]
