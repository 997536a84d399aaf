# src/task_manager/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then serves the Flask app.
"""

from __future__ import annotations

import logging

from ..api.app import create_app
from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    console_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    log_dir = settings.data_dir if settings.log_to_file else None
    setup_logging(
        console_level=console_level,
        log_dir=log_dir,
        access_log=console_level <= logging.DEBUG,
    )

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    app = create_app(state)

    logger.info("Listening on %s:%s", settings.host, settings.port)
    try:
        app.run(host=settings.host, port=settings.port, debug=settings.debug, threaded=True)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
