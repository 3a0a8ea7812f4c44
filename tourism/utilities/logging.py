"""Logging setup.

The library only creates module loggers under the ``tourism`` namespace.
Applications call setup_logging() once to see them.
"""

import logging
import sys

LOGGER_NAME = "tourism"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Safe to call repeatedly: the handler is only added once, later calls
    just update the level.

    Args:
        level: Level name or number (default: configured log level)

    Returns:
        The package logger
    """
    if level is None:
        from tourism.config import get_settings

        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not any(getattr(h, "_tourism_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._tourism_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
