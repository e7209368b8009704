"""Main application entry point.

Runs the NiceGUI chat client (default) or the development echo server.
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


def run_client() -> None:
    """Run the chat UI.

    The chat endpoint comes from TALKNATIVE_API_BASE_URL. A missing or
    malformed value does not stop startup; each send reports it instead.
    """
    from talknative.config import get_client_config
    from talknative.ui import chat_page

    config = get_client_config()
    if config.api_base_url is None:
        logger.warning("TALKNATIVE_API_BASE_URL is not set; messages will fail to send")
    else:
        logger.info(f"Chat endpoint base URL: {config.api_base_url}")

    logger.info(f"Chat UI available at http://localhost:{config.ui_port}/")
    chat_page.main()


def run_echo() -> None:
    """Run the echo server that stands in for the chat server locally."""
    import uvicorn

    from talknative.api.app import create_app

    port = int(os.getenv("ECHO_PORT", "8000"))
    logger.info(f"Starting echo server on http://localhost:{port}")
    logger.info(f"Point the client at it with TALKNATIVE_API_BASE_URL=http://localhost:{port}")

    uvicorn.run(
        create_app(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def main() -> None:
    """Application entry point.

    Set RUN_MODE=echo to run the development echo server instead of the UI.
    """
    mode = os.getenv("RUN_MODE", "client").lower()

    logger.info(f"Starting TalkNative in {mode} mode")

    if mode == "echo":
        run_echo()
    else:
        run_client()


if __name__ == "__main__":
    main()
