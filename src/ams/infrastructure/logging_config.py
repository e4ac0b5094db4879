"""Logging setup for the CLI and the HTTP server.

Library modules only ever call ``logging.getLogger(__name__)``; handlers
are installed here, once, by the entry points.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - [%(levelname)-7s] - %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Send ``ams.*`` records to stderr at *level*."""
    logger = logging.getLogger("ams")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
