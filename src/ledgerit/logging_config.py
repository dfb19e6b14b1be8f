"""Logging setup for the ledgerit command line.

Library modules only create loggers with ``logging.getLogger(__name__)``.
Handlers are attached here, once, by the application entry point.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LEVEL = "WARNING"

ROOT_LOGGER_NAME = "ledgerit"


def configure_logging(level: str | int = DEFAULT_LEVEL) -> logging.Logger:
    """Configure the ``ledgerit`` logger to write to stderr.

    Calling this again only changes the level; no second handler is added.

    Args:
        level: Level name ("DEBUG", "info", ...) or numeric level

    Returns:
        The configured ``ledgerit`` logger

    Raises:
        ValueError: If the level name is unknown
    """
    if isinstance(level, str):
        numeric = logging.getLevelName(level.strip().upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level}")
        level = numeric

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in logger.handlers:
        if getattr(handler, "_ledgerit_handler", False):
            # Follow stderr if it has been replaced since the last call
            handler.stream = sys.stderr
            break
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        handler._ledgerit_handler = True
        logger.addHandler(handler)

    return logger
