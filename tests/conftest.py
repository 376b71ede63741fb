"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - upstream_config: Config with a fake API key and default sampling
    - make_completion: Builder for fake chat-completion responses
    - mock_openai: Patched AsyncOpenAI client with an AsyncMock create()
    - completion_service: Real CompletionService over the mocked client
    - async_client: HTTPX client for API testing with the service injected
"""

from collections.abc import AsyncGenerator, Callable, Iterator
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from minichat.api import app
from minichat.upstream.client import CompletionService, get_completion_service
from minichat.upstream.config import UpstreamConfig


def build_completion(*contents: str | None) -> SimpleNamespace:
    """Build an object shaped like an OpenAI ChatCompletion."""
    return SimpleNamespace(
        choices=[
            SimpleNamespace(message=SimpleNamespace(role="assistant", content=content))
            for content in contents
        ]
    )


@pytest.fixture
def upstream_config() -> UpstreamConfig:
    """Return config with a fake key and default sampling parameters."""
    return UpstreamConfig(api_key="sk-test-key", base_url=None, model_name="gpt-4o-mini")


@pytest.fixture
def make_completion() -> Callable[..., SimpleNamespace]:
    return build_completion


@pytest.fixture
def mock_openai() -> Iterator[MagicMock]:
    """Patch AsyncOpenAI so no request leaves the process.

    Yields:
        The mocked client instance; its create() replies "Hello!".
    """
    with patch("minichat.upstream.client.AsyncOpenAI") as mock_class:
        client = mock_class.return_value
        client.chat.completions.create = AsyncMock(return_value=build_completion("Hello!"))
        yield client


@pytest.fixture
def completion_service(
    upstream_config: UpstreamConfig, mock_openai: MagicMock
) -> CompletionService:
    return CompletionService(config=upstream_config)


@pytest.fixture
async def async_client(
    completion_service: CompletionService,
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    app.dependency_overrides[get_completion_service] = lambda: completion_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
