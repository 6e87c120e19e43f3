"""
Logging configuration and utilities
"""

import logging
import sys
from typing import Optional

from ..config import get_settings

PACKAGE_LOGGER = "github_list_all_prs"


class StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stderr`` is at emit time"""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stderr
        super().emit(record)


def setup_logging(
    name: Optional[str] = None,
    level: Optional[str] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Setup logging configuration

    Args:
        name: Logger name, defaults to the package logger
        level: Log level
        format_string: Log format string

    Returns:
        Configured logger instance
    """
    settings = get_settings()

    # Use provided parameters or fall back to settings
    log_level = level or settings.log_level
    log_format = format_string or settings.log_format

    logger = logging.getLogger(name or PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    # stdout carries the digest, so logs go to stderr
    console_handler = StderrHandler()
    console_handler.setLevel(getattr(logging, log_level.upper(), logging.WARNING))
    console_handler.setFormatter(logging.Formatter(log_format))
    logger.addHandler(console_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name

    Module loggers under the package propagate to the package logger, which is
    configured on first use.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        setup_logging()

    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


class LoggerMixin:
    """Mixin class to add logging capability to other classes"""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class"""
        return get_logger(self.__class__.__name__)
