"""
Logger Factory - Convenience wrapper for LoggingService.

Provides get_logger() and configure_logging() functions so callers
do not need to import LoggingService directly.

License: MIT
"""

from typing import Optional

import structlog

from mockgen_core.config import settings
from mockgen_core.logging_service import LoggingService


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a module/component-specific logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        BoundLogger instance

    Raises:
        RuntimeError: If logging not configured yet (call configure_logging() first)
        ValueError: If name is empty

    Example:
        ```python
        from mockgen_core.utils import configure_logging, get_logger

        configure_logging()
        logger = get_logger(__name__)
        logger.info("mock_written", interface="Vehicle")
        ```
    """
    return LoggingService.get_logger(name)


def configure_logging(level: Optional[str] = None, format: Optional[str] = None) -> None:
    """
    Configure structured logging infrastructure.

    Falls back to settings.log_level and settings.log_format for any
    argument left as None.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format ("json" or "console")

    Raises:
        ValueError: If level or format is invalid
        RuntimeError: If called after logging already configured
    """
    if level is None:
        level = settings.log_level
    if format is None:
        format = settings.log_format

    LoggingService.configure_logging(level=level, format=format)
