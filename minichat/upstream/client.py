"""Chat-completion service backed by the OpenAI async client.

Core module for turning a conversation into one assistant reply.

Behavior:

1. **Explicit configuration** - The service receives an UpstreamConfig at
   construction. The handler never reads the credential from the environment.

2. **Lazy client** - The OpenAI client refuses to construct without an API key.
   The service defers construction to the first request, so a missing key
   surfaces as a failed chat request instead of a failed startup.

3. **Single error type** - Network failures, authentication failures, rate
   limits and malformed responses all become UpstreamError carrying the
   underlying message text. There is no retry and no fallback provider.

4. **Singleton** - One service instance is shared by all requests. It holds no
   per-request state.
"""

import logging
from collections.abc import Sequence

from openai import AsyncOpenAI

from minichat.models.schemas import Message, Role
from minichat.upstream.config import UpstreamConfig, get_upstream_config

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "API key not configured. Set LLM_API_KEY or OPENAI_API_KEY in .env"


class UpstreamError(Exception):
    """Raised when the upstream completion call fails for any reason."""


class CompletionService:
    """Service for forwarding conversations to the completion API.

    Wraps the OpenAI client with:
    - Fixed model, temperature and token ceiling from configuration
    - Lazy client creation
    - Centralized error wrapping and logging
    """

    def __init__(self, config: UpstreamConfig | None = None) -> None:
        """Initialize the completion service.

        Args:
            config: Optional upstream configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_upstream_config()
        self._client: AsyncOpenAI | None = None

    @property
    def config(self) -> UpstreamConfig:
        return self._config

    def _get_client(self) -> AsyncOpenAI:
        """Return the OpenAI client, creating it on first use.

        Raises:
            UpstreamError: If no API key is configured.
        """
        if self._client is None:
            if not self._config.has_api_key:
                raise UpstreamError(MISSING_KEY_MESSAGE)
            self._client = AsyncOpenAI(
                api_key=self._config.api_key,
                base_url=self._config.base_url,
            )
        return self._client

    def build_request(self, messages: Sequence[Message]) -> dict:
        """Build the keyword arguments for the completion call.

        Args:
            messages: The conversation, oldest message first.

        Returns:
            Keyword arguments for ``chat.completions.create``.
        """
        return {
            "model": self._config.model_name,
            "messages": [m.model_dump() for m in messages],
            "max_tokens": self._config.max_tokens,
            "temperature": self._config.temperature,
        }

    async def complete(self, messages: Sequence[Message]) -> Message:
        """Get the assistant reply for a conversation.

        Args:
            messages: The conversation, oldest message first.

        Returns:
            The first choice's message as an assistant Message.

        Raises:
            UpstreamError: If the call fails or returns no choices.
        """
        try:
            client = self._get_client()
            completion = await client.chat.completions.create(
                **self.build_request(messages)
            )
        except UpstreamError as e:
            logger.error(f"Upstream completion failed: {e}")
            raise
        except Exception as e:
            message = getattr(e, "message", None) or str(e)
            logger.error(f"Upstream completion failed: {message}")
            raise UpstreamError(message) from e

        if not completion.choices:
            logger.error("Upstream completion returned no choices")
            raise UpstreamError("Upstream returned no choices")

        reply = completion.choices[0].message
        return Message(role=Role.ASSISTANT, content=reply.content or "")


# Module-level singleton instance
_completion_service: CompletionService | None = None


def get_completion_service() -> CompletionService:
    """Get or create the global completion service.

    Used as a FastAPI dependency, so tests can override it.

    Returns:
        The CompletionService instance.
    """
    global _completion_service
    if _completion_service is None:
        _completion_service = CompletionService()
    return _completion_service
