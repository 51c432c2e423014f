"""
Dice Notation - Logging Configuration

Library modules only create module-level loggers; handlers are installed
once by the entry point.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER = "src"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Calling this again only changes the level.

    Args:
        level: Level name or number

    Returns:
        The package logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
