"""
Process entry point.

Usage:
    python -m htmx_todos
    htmx-todos

Host, port and log level come from the environment (see settings.py).
"""
from __future__ import annotations

import logging

import uvicorn

from .logging_setup import setup_logging
from .settings import get_settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def main() -> None:
    """Configure logging and serve the application with uvicorn."""
    settings = get_settings()
    setup_logging(settings.log_level)

    from .main import app

    logger.info("The server runs on http://%s:%d", settings.host, settings.port)
    # log_config=None keeps uvicorn on the handlers configured above
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
