"""
File for logging

Log records go to stderr so they never mix with decoded values printed on stdout.
"""
import logging
import sys
from typing import Optional

from .formats import LOGGING

__all__ = ["LEVELS", "get_logger", "set_level"]

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_logger(name: str, log_level: str = LOGGING.LEVEL, format_string: Optional[str] = None) -> logging.Logger:
    """
    Get or create a logger writing to stderr.

    Args:
        name: Logger name (typically __name__ from calling module)
        log_level: One of LEVELS, case-insensitive
        format_string: Optional custom format string, LOGGING.FORMAT otherwise

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Handlers are attached once per name
    if logger.handlers:
        return logger

    logger.setLevel(log_level.upper())

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or LOGGING.FORMAT))
    logger.addHandler(handler)
    return logger


def set_level(log_level: str, *names: str) -> None:
    """Change the level of already configured loggers"""
    level = log_level.upper()
    if level not in LEVELS:
        raise ValueError(f"Unknown log level: {log_level!r}")
    for name in names:
        logging.getLogger(name).setLevel(level)
