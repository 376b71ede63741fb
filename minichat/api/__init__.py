"""FastAPI endpoints for MiniChat.

Async request handling for the single chat proxy route.

Endpoints:
    - GET /health: Service health status
    - POST /api/chat: Forward a conversation, return the assistant reply
    - GET /{path}: Prebuilt frontend bundle, when one is present
"""

from minichat.api.app import app, create_app

__all__ = ["app", "create_app"]
