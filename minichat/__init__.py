"""MiniChat - a minimal web chat client over a chat-completion API.

Combines FastAPI for the proxy endpoint, the OpenAI client for upstream
completions, NiceGUI for the chat page, and Pydantic for data validation.

Components:
    - api: The /api/chat proxy endpoint and static bundle serving
    - upstream: Chat-completion client and its configuration
    - ui: Chat page and in-memory conversation state
    - models: Request/response schemas
"""

__version__ = "0.1.0"
