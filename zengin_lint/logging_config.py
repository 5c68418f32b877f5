"""
Centralized logging configuration.

Library modules only create loggers; handlers are installed by the CLI.
"""

from __future__ import annotations

import logging
import sys


def setup_logging(level: int = logging.WARNING) -> None:
    """Configure the zengin_lint logger with a stderr handler.

    Args:
        level: Logging level.
    """
    logger = logging.getLogger("zengin_lint")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(name)-28s] %(levelname)-7s %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(handler)
    logger.propagate = False
