"""
SalonAssist entry point.

Serves the REST API with uvicorn, or runs the offline console demo.

Usage:
    API server:   python main.py serve
    Console mode: python main.py console
"""

import logging
import sys

from salonassist.config import settings

logger = logging.getLogger(__name__)


def _run_api_mode() -> None:
    """Start the REST API on the configured host and port."""
    import uvicorn

    from salonassist.api import create_app

    app = create_app()
    logger.info("Serving %s API on %s:%d", settings.app_name, settings.api.host, settings.api.port)
    uvicorn.run(app, host=settings.api.host, port=settings.api.port, log_level=settings.log_level.lower())


def _run_console_mode() -> None:
    """Start the offline console demo."""
    from console_demo import ConsoleSession

    session = ConsoleSession()
    session.run()


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "console":
        _run_console_mode()
    else:
        _run_api_mode()
