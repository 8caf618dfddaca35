"""Logging configuration for changelog tasks.

Status messages ("Finalizing CHANGELOG.md for '1.2.0'...") are logged at
INFO and section traces at DEBUG, on stderr so that extracted notes on
stdout stay clean.

Usage:
    from changelog_tasks.logging_config import setup_logging

    # At application startup
    setup_logging()

    # In modules
    logger = logging.getLogger(__name__)
    logger.info("Message")

Environment variables:
    CHANGELOG_TASKS_LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR)
"""

import logging
import os
import sys

from changelog_tasks.config import ENV_LOG_LEVEL

ROOT_LOGGER_NAME = "changelog_tasks"

# Log format
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FORMAT_DEBUG = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_log_level() -> int:
    """Get log level from environment variable."""
    level_str = os.environ.get(ENV_LOG_LEVEL, "INFO").upper()
    levels = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
    }
    return levels.get(level_str, logging.INFO)


def setup_logging(level: int | None = None) -> None:
    """Configure the changelog_tasks logger.

    Args:
        level: Log level (uses CHANGELOG_TASKS_LOG_LEVEL if not specified)
    """
    if level is None:
        level = get_log_level()

    log_format = LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)

    # Remove existing handlers
    package_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(log_format, DATE_FORMAT))
    package_logger.addHandler(console_handler)

    # Don't propagate to root logger
    package_logger.propagate = False


def set_debug_mode(enabled: bool = True) -> None:
    """Enable or disable debug mode.

    Args:
        enabled: Whether to enable debug mode
    """
    level = logging.DEBUG if enabled else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
