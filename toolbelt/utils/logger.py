"""Package logger configuration for toolbelt."""

import logging
import sys
from typing import Optional

from toolbelt.config.settings import get_settings

__all__ = ["get_logger", "setup_logger"]

PACKAGE_LOGGER_NAME = "toolbelt"


def setup_logger(
    name: str = PACKAGE_LOGGER_NAME,
    level: Optional[str] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    The handler is attached only once; later calls return the already
    configured logger untouched.

    Args:
        name: Logger name (the package name by default).
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Falls back
            to ``TOOLBELT_LOG_LEVEL`` via settings.
        format_string: Custom format string.

    Returns:
        Configured logger instance.
    """
    level = level or get_settings().log_level
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger under the package logger, configuring the package logger first.

    Args:
        name: Module name, usually ``__name__``. Names outside the package
            are nested under "toolbelt".

    Returns:
        Child logger that propagates to the configured package logger.
    """
    setup_logger()
    if name == PACKAGE_LOGGER_NAME or name.startswith(PACKAGE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{name}")
