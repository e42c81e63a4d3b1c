"""Global logger configuration for the underbar package."""

import logging
import sys

from underbar.core.config import settings

__all__ = ["logger", "setup_logger"]


def _has_stream_handler(logger: logging.Logger) -> bool:
    # Subclasses (e.g. capture handlers installed by test runners) don't count
    return any(type(handler) is logging.StreamHandler for handler in logger.handlers)


def setup_logger(
    name: str = "underbar",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (typically the package name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to
            ``settings.LOG_LEVEL``.
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not _has_stream_handler(logger):
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


# Default logger instance for the package
logger = setup_logger()
