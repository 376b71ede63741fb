"""Main application entry point.

Runs FastAPI (port 8000) with NiceGUI mounted for the chat interface, or
with the prebuilt frontend bundle when one is present.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def run_integrated() -> None:
    """Run FastAPI with the chat UI on the same server.

    FastAPI handles API routes. The UI is the prebuilt bundle if present,
    otherwise the NiceGUI page. Both are served on PORT.
    """
    import uvicorn

    from minichat.api.app import create_app

    app = create_app()
    port = int(os.getenv("PORT", "8000"))

    if app.state.serves_frontend_bundle:
        logger.info("Prebuilt frontend bundle found; NiceGUI page not mounted")
    else:
        from nicegui import ui

        from minichat.ui.chat_page import chat_page  # noqa: F401 - Registers the page

        # Mount NiceGUI onto FastAPI
        ui.run_with(
            app,
            title="MiniChat",
            favicon="💬",
            storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "minichat-secret"),
        )

    logger.info(f"Starting integrated server on http://localhost:{port}")
    logger.info(f"API docs available at http://localhost:{port}/docs")
    logger.info(f"Chat UI available at http://localhost:{port}/")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def separate_commands(host: str, api_port: str) -> list[list[str]]:
    """Commands for the API and UI processes of separate mode."""
    return [
        [
            sys.executable, "-m", "uvicorn", "minichat.api.app:app",
            "--host", host, "--port", api_port, "--reload",
        ],
        [sys.executable, "-c", "from minichat.ui.chat_page import main; main()"],
    ]


def run_separate() -> None:
    """Run the API on PORT and the NiceGUI page on UI_PORT as two processes.

    The page talks to the API through API_BASE_URL. When either process
    exits, the other is stopped.
    """
    import subprocess
    import time

    api_port = os.getenv("PORT", "8000")
    env = {
        **os.environ,
        "API_BASE_URL": os.getenv("API_BASE_URL", f"http://localhost:{api_port}"),
    }
    ui_port = os.getenv("UI_PORT", "8080")
    logger.info(f"API on http://localhost:{api_port}, UI on http://localhost:{ui_port}")

    procs = [
        subprocess.Popen(cmd, env=env)
        for cmd in separate_commands(os.getenv("HOST", "0.0.0.0"), api_port)
    ]
    try:
        while all(p.poll() is None for p in procs):
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info("Interrupted, stopping servers")
    finally:
        for p in procs:
            p.terminate()
        for p in procs:
            p.wait()


def main() -> None:
    """Application entry point.

    Set RUN_MODE=separate to run FastAPI and NiceGUI on different ports.
    Default is integrated mode (both on PORT).
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting MiniChat in {mode} mode")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
