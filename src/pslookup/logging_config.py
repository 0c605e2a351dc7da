"""Logging setup for the pslookup command line tool.

Library modules only create loggers; handlers are installed here, and
only by the CLI.
"""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int | str = logging.WARNING) -> None:
    """Send pslookup log records to stderr at the given level."""
    logger = logging.getLogger("pslookup")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
