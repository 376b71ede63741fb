"""Upstream configuration with environment variable loading.

Pydantic-based configuration for the chat-completion client.
Supports OpenAI and OpenAI-compatible APIs via custom base URL.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class UpstreamConfig(BaseModel):
    """Configuration for the upstream chat-completion API.

    Supports OpenAI and any OpenAI-compatible API via LLM_BASE_URL.
    Sampling parameters are fixed here and never taken from a request.

    Attributes:
        api_key: API key for model access. May be empty; requests then fail.
        base_url: API base URL (None for OpenAI default).
        model_name: Model identifier to use.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        max_tokens: Maximum tokens in generated response.
        max_messages: Largest conversation the proxy will forward.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("LLM_API_KEY", os.getenv("OPENAI_API_KEY", "")),
        description="API key for LLM provider",
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or None,
        description="API base URL (None for OpenAI default)",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", "gpt-4o-mini"),
        description="Model to use",
    )
    temperature: float = Field(
        default=0.2,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    max_tokens: int = Field(
        default=800,
        ge=1,
        le=128000,
        description="Maximum tokens in generated response",
    )
    max_messages: int = Field(
        default=30,
        ge=1,
        description="Maximum number of messages accepted per request",
    )

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip surrounding whitespace; an empty key is allowed."""
        return v.strip()

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def get_upstream_config() -> UpstreamConfig:
    """Create upstream configuration from environment.

    Returns:
        Configured UpstreamConfig instance.
    """
    return UpstreamConfig()
