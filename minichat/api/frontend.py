"""Prebuilt frontend bundle serving.

When a built single-page app exists on disk, its files are served as-is and
any other GET path falls back to the bundle's index.html.
"""

import logging
import os
from pathlib import Path

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse

logger = logging.getLogger(__name__)

DEFAULT_FRONTEND_DIST = "frontend/dist"
INDEX_FILE = "index.html"


def get_frontend_dist() -> Path:
    """Return the bundle directory configured by FRONTEND_DIST."""
    return Path(os.getenv("FRONTEND_DIST", DEFAULT_FRONTEND_DIST))


def has_frontend_bundle(dist_dir: Path) -> bool:
    """Check whether a prebuilt bundle with an entry document exists."""
    return (dist_dir / INDEX_FILE).is_file()


def create_frontend_router(dist_dir: Path) -> APIRouter:
    """Create a catch-all router serving the bundle in ``dist_dir``.

    Args:
        dist_dir: Directory holding the built frontend.

    Returns:
        Router to include after all API routes.
    """
    root = dist_dir.resolve()
    index_path = root / INDEX_FILE
    router = APIRouter(tags=["frontend"])

    @router.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str) -> FileResponse:
        if full_path == "api" or full_path.startswith("api/"):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

        if full_path:
            candidate = (root / full_path).resolve()
            if candidate.is_relative_to(root) and candidate.is_file():
                return FileResponse(candidate)

        return FileResponse(index_path)

    logger.info(f"Serving frontend bundle from {root}")
    return router
