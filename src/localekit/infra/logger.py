"""
Logging setup for the localekit command line.
"""

__all__ = ["setup_logging"]

import logging

from localekit.infra.paths import PACKAGE_NAME

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a console handler to the ``localekit`` logger.

    Calling this again only updates the level; handlers are never duplicated.

    Args:
        level: Level name (``"DEBUG"``) or number.

    Returns:
        The package logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(PACKAGE_NAME)
    logger.setLevel(level)

    if not any(getattr(h, "_localekit", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler._localekit = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
