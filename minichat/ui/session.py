"""In-memory conversation state and the proxy call behind the chat page."""

import logging
import os
from collections.abc import Awaitable, Callable, Mapping, Sequence

import httpx

from minichat.models.schemas import Message, Role

logger = logging.getLogger(__name__)

API_BASE_URL = os.getenv("API_BASE_URL", f"http://localhost:{os.getenv('PORT', '8000')}")

DEFAULT_SYSTEM_PROMPT = "You are a helpful, concise assistant."

ReplyFetcher = Callable[[Sequence[Message]], Awaitable[Message]]


class ProxyError(Exception):
    """Raised when the chat proxy cannot produce a reply."""


def get_system_prompt() -> str:
    return os.getenv("CHAT_SYSTEM_PROMPT", DEFAULT_SYSTEM_PROMPT)


# Browser side of is_submit_key: suppress the newline exactly when Enter submits.
ENTER_KEY_HANDLER = (
    "(e) => { if (e.key === 'Enter') {"
    " if (!e.shiftKey) e.preventDefault();"
    " emit({shiftKey: e.shiftKey}); } }"
)


def is_submit_key(args: Mapping[str, object] | None) -> bool:
    """Enter submits; Shift+Enter only inserts a newline."""
    return not (args or {}).get("shiftKey", False)


async def request_reply(
    messages: Sequence[Message],
    base_url: str = API_BASE_URL,
    client: httpx.AsyncClient | None = None,
) -> Message:
    """POST the conversation to /api/chat and return the reply.

    Args:
        messages: The full conversation, system message included.
        base_url: Base URL of the MiniChat API.
        client: Optional client to reuse (tests pass one over ASGITransport).

    Returns:
        The assistant message from the proxy.

    Raises:
        ProxyError: With the proxy's ``error`` text, or a connection message.
    """
    payload = {"messages": [m.model_dump() for m in messages]}

    async def _post(http: httpx.AsyncClient) -> httpx.Response:
        return await http.post(f"{base_url}/api/chat", json=payload)

    try:
        if client is not None:
            response = await _post(client)
        else:
            async with httpx.AsyncClient() as http:
                response = await _post(http)
    except httpx.RequestError as e:
        raise ProxyError(f"Connection failed: {e}") from e

    try:
        data = response.json()
    except ValueError:
        data = {}

    if response.is_error:
        error = data.get("error") if isinstance(data, dict) else None
        raise ProxyError(error or "Request failed")

    try:
        return Message.model_validate(data["reply"])
    except (KeyError, TypeError, ValueError) as e:
        raise ProxyError("Malformed reply from server") from e


class ChatSession:
    """Manages chat state for one browser session.

    The conversation starts with a single system message that is sent with
    every request but never displayed. ``busy`` is set while a request is
    in flight; sends during that time are ignored.
    """

    def __init__(
        self,
        fetch_reply: ReplyFetcher = request_reply,
        system_prompt: str | None = None,
    ) -> None:
        self._fetch_reply = fetch_reply
        self._system_prompt = system_prompt if system_prompt is not None else get_system_prompt()
        self.messages: list[Message] = []
        self.busy: bool = False
        self.reset()

    def reset(self) -> None:
        self.messages = [Message(role=Role.SYSTEM, content=self._system_prompt)]

    @property
    def visible_messages(self) -> list[Message]:
        return [m for m in self.messages if m.role != Role.SYSTEM]

    def add_message(self, role: Role, content: str) -> Message:
        message = Message(role=role, content=content)
        self.messages.append(message)
        return message

    async def send(
        self,
        text: str,
        on_change: Callable[[], None] | None = None,
    ) -> bool:
        """Send a user message and append the assistant's answer.

        Args:
            text: Raw input text.
            on_change: Called after each state change (user message
                       appended and busy set, then reply appended and busy
                       cleared).

        Returns:
            True if a request was issued, False for empty input or while busy.
        """
        if not text.strip() or self.busy:
            return False

        self.add_message(Role.USER, text.strip())
        self.busy = True
        if on_change:
            on_change()

        try:
            reply = await self._fetch_reply(list(self.messages))
            self.messages.append(reply)
        except ProxyError as e:
            logger.warning(f"Chat request failed: {e}")
            self.add_message(Role.ASSISTANT, f"Error: {e}")
        finally:
            self.busy = False
            if on_change:
                on_change()

        return True
