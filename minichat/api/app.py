"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from minichat.api.chat import router as chat_router
from minichat.api.errors import register_error_handlers
from minichat.api.frontend import (
    create_frontend_router,
    get_frontend_dist,
    has_frontend_bundle,
)
from minichat.upstream.client import get_completion_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Warns when no upstream credential is configured. The server still
    starts; chat requests fail until a key is provided.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    # Startup
    logger.info("Starting MiniChat API...")
    config = get_completion_service().config
    if not config.has_api_key:
        logger.warning("No LLM_API_KEY or OPENAI_API_KEY set; chat requests will fail")
    else:
        logger.info(f"Forwarding chat requests to model {config.model_name}")
    yield
    # Shutdown
    logger.info("Shutting down MiniChat API...")


def create_app(frontend_dist: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        frontend_dist: Directory of a prebuilt frontend bundle.
                       Defaults to FRONTEND_DIST. Served only if it
                       contains an index.html.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="MiniChat API",
        description=(
            "Minimal chat proxy. Accepts a conversation of role-tagged messages, "
            "forwards it to a chat-completion API with fixed sampling parameters, "
            "and returns the assistant's reply."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    register_error_handlers(application)
    application.include_router(chat_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "minichat"}

    dist_dir = frontend_dist if frontend_dist is not None else get_frontend_dist()
    if has_frontend_bundle(dist_dir):
        # Catch-all route, must stay last
        application.include_router(create_frontend_router(dist_dir))
    application.state.serves_frontend_bundle = has_frontend_bundle(dist_dir)

    return application


app = create_app()
