"""
LoggingService - Centralized structured logging for go-mockgen-tool.

Provides consistent, machine-readable logging across all modules
using structlog. Output goes to stderr so generated code printed
to stdout is never interleaved with log lines.

License: MIT
"""

import logging
import sys
import traceback
from dataclasses import dataclass
from typing import Any, Optional

import structlog
from structlog.types import Processor

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_FORMATS = ("json", "console")


@dataclass
class LoggingConfig:
    """
    Configuration for LoggingService.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format ("json" or "console")
        output_stream: Output destination (default: sys.stderr)

    Example:
        config = LoggingConfig(level="INFO", format="json")
    """

    level: str = "INFO"
    format: str = "json"
    output_stream: Any = sys.stderr


class LoggingService:
    """
    Centralized structured logging service using structlog.

    Example:
        # Setup logging once at startup
        LoggingService.configure_logging(level="INFO", format="json")

        # Get logger for a module
        logger = LoggingService.get_logger("mockgen_cli.generate")

        logger.info("mock_written", interface="Vehicle", path="vehicle_mock.go")
    """

    # Class-level state
    _configured: bool = False
    _log_level: str = "INFO"
    _config: Optional[LoggingConfig] = None
    _loggers: dict[str, structlog.BoundLogger] = {}

    @classmethod
    def configure_logging(
        cls, level: str = "INFO", format: str = "json", config: Optional[LoggingConfig] = None
    ) -> None:
        """
        Configure global structured logging infrastructure.

        Sets up structlog with JSON or console output to stderr and
        configures the filtering level. Call once at startup.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            format: Output format ("json" or "console")
            config: Optional LoggingConfig for advanced configuration

        Raises:
            ValueError: If level or format is invalid
            RuntimeError: If called after logging already configured
        """
        if cls._configured:
            raise RuntimeError("Logging already configured")

        if config is not None:
            cfg = config
        else:
            level_upper = level.upper()
            if level_upper not in VALID_LEVELS:
                raise ValueError(
                    f"Invalid log level: {level}. "
                    "Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
                )

            format_lower = format.lower()
            if format_lower not in VALID_FORMATS:
                raise ValueError(f"Invalid format: {format}. Must be 'json' or 'console'")

            cfg = LoggingConfig(level=level_upper, format=format_lower)

        cls._config = cfg
        cls._log_level = cfg.level

        structlog.configure(
            processors=cls._setup_processors(),
            wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, cfg.level)),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=cfg.output_stream),
            cache_logger_on_first_use=False,
        )

        cls._configured = True

    @classmethod
    def get_logger(cls, name: str) -> structlog.BoundLogger:
        """
        Get a module/component-specific logger.

        Args:
            name: Logger name (typically module path)

        Returns:
            BoundLogger instance

        Raises:
            RuntimeError: If logging not configured yet
            ValueError: If name is empty
        """
        if not cls._configured:
            raise RuntimeError("Logging not configured. Call configure_logging() first.")

        if not name:
            raise ValueError("Logger name cannot be empty")

        if name in cls._loggers:
            return cls._loggers[name]

        logger = structlog.get_logger(name)
        cls._loggers[name] = logger

        return logger

    @classmethod
    def log_error(
        cls,
        error: Exception,
        context: Optional[dict[str, Any]] = None,
        logger_name: str = "mockgen",
        include_stack_trace: bool = False,
    ) -> None:
        """
        Log an error with its code and correlation id.

        Args:
            error: Exception instance
            context: Additional context about where the error occurred
            logger_name: Which logger to use
            include_stack_trace: Whether to include the current stack trace
        """
        logger = cls.get_logger(logger_name)

        log_context: dict[str, Any] = {
            "error_type": type(error).__name__,
            "error_message": str(error),
        }

        error_code = getattr(error, "error_code", None)
        if error_code:
            log_context["error_code"] = error_code

        correlation_id = getattr(error, "correlation_id", None)
        if correlation_id:
            log_context["correlation_id"] = correlation_id

        if context:
            log_context.update(context)

        if include_stack_trace:
            log_context["stack_trace"] = traceback.format_exc()

        logger.error("error_occurred", **log_context)

    @classmethod
    def reset(cls) -> None:
        """Forget the current configuration (used by tests)."""
        cls._configured = False
        cls._log_level = "INFO"
        cls._config = None
        cls._loggers = {}
        structlog.reset_defaults()

    @classmethod
    def _setup_processors(cls) -> list[Processor]:
        """
        Setup structlog processors based on configuration.

        Processors (in order):
            1. add_log_level: Add log level to context
            2. TimeStamper: Add ISO timestamp
            3. StackInfoRenderer: Render stack info if requested
            4. format_exc_info: Format exception info
            5. JSONRenderer or ConsoleRenderer: Final output format
        """
        processors: list[Processor] = [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
        ]

        if cls._config and cls._config.format == "console":
            processors.append(structlog.dev.ConsoleRenderer(colors=False))
        else:
            processors.append(structlog.processors.JSONRenderer())

        return processors
