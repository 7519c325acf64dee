"""
================================================================================
Logging Setup
================================================================================

Centralized Loguru configuration for test runs.

Library modules log through ``loguru.logger`` directly; this module installs
the sinks once per process.

Author: Automation Team
License: MIT
================================================================================
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"

_logger_initialized: bool = False


def init_logger(config=None, level: Optional[str] = None, format_str: Optional[str] = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Args:
        config: Optional TestConfig supplying ``logging.level``,
            ``logging.format`` and ``logging.file``
        level: Log level (DEBUG, INFO, WARNING, ERROR). Overrides config.
        format_str: Custom log format string. Overrides config.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    log_level = (level or (config.log_level if config else "INFO")).upper()
    log_format = format_str or (config.get("logging.format") if config else None) or DEFAULT_FORMAT

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    log_file = config.log_file if config else None
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format.replace("{level: <8}", "{level}"),  # Remove padding for file
            rotation=config.get("logging.rotation", "10 MB"),
            retention=config.get("logging.retention", "7 days"),
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def reset_logger() -> None:
    """Allow ``init_logger`` to run again, e.g. after a configuration reload."""
    global _logger_initialized
    _logger_initialized = False


__all__ = [
    "init_logger",
    "reset_logger",
]
