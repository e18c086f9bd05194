"""
Unit tests for LoggingService and the logger factory.

Tests logging configuration, logger creation and error logging.

License: MIT
"""

import json
from io import StringIO

import pytest

from mockgen_core.exceptions import DeclarationNotFoundError
from mockgen_core.logging_service import LoggingConfig, LoggingService
from mockgen_core.utils import configure_logging, get_logger

# ============================================================
# FIXTURES
# ============================================================


@pytest.fixture(autouse=True)
def reset_logging_service():
    """Start every test with logging unconfigured."""
    LoggingService.reset()
    yield
    LoggingService.reset()


@pytest.fixture
def stream_logging():
    """Configure JSON logging into an in-memory stream."""
    stream = StringIO()
    LoggingService.configure_logging(
        config=LoggingConfig(level="DEBUG", format="json", output_stream=stream)
    )
    return stream


def _last_record(stream: StringIO) -> dict:
    return json.loads(stream.getvalue().strip().splitlines()[-1])


# ============================================================
# CONFIGURATION TESTS
# ============================================================


def test_configure_logging_success():
    """Test normal logging configuration."""
    LoggingService.configure_logging(level="info", format="JSON")

    assert LoggingService._configured is True
    assert LoggingService._log_level == "INFO"
    assert LoggingService._config.format == "json"


def test_configure_logging_with_config_object():
    """Test configuration with LoggingConfig object."""
    LoggingService.configure_logging(config=LoggingConfig(level="DEBUG", format="console"))

    assert LoggingService._log_level == "DEBUG"
    assert LoggingService._config.format == "console"


def test_configure_logging_invalid_level():
    """Test configuration with invalid log level."""
    with pytest.raises(ValueError) as exc_info:
        LoggingService.configure_logging(level="INVALID")

    assert "Invalid log level" in str(exc_info.value)


def test_configure_logging_invalid_format():
    """Test configuration with invalid format."""
    with pytest.raises(ValueError) as exc_info:
        LoggingService.configure_logging(format="xml")

    assert "Invalid format" in str(exc_info.value)


def test_configure_logging_twice_raises():
    """Test that configuration is allowed only once."""
    LoggingService.configure_logging()

    with pytest.raises(RuntimeError, match="already configured"):
        LoggingService.configure_logging()


def test_reset_allows_reconfiguration():
    LoggingService.configure_logging()
    LoggingService.reset()

    LoggingService.configure_logging(level="ERROR")
    assert LoggingService._log_level == "ERROR"


# ============================================================
# LOGGER TESTS
# ============================================================


def test_get_logger_before_configure_raises():
    with pytest.raises(RuntimeError, match="not configured"):
        LoggingService.get_logger("mockgen_core")


def test_get_logger_empty_name_raises():
    LoggingService.configure_logging()

    with pytest.raises(ValueError):
        LoggingService.get_logger("")


def test_get_logger_is_cached():
    LoggingService.configure_logging()

    assert LoggingService.get_logger("a") is LoggingService.get_logger("a")


def test_logger_writes_json(stream_logging):
    LoggingService.get_logger("test").info("mock_written", interface="Vehicle")

    record = _last_record(stream_logging)
    assert record["event"] == "mock_written"
    assert record["interface"] == "Vehicle"
    assert record["level"] == "info"
    assert "timestamp" in record


def test_level_filtering():
    stream = StringIO()
    LoggingService.configure_logging(
        config=LoggingConfig(level="WARNING", format="json", output_stream=stream)
    )

    logger = LoggingService.get_logger("test")
    logger.debug("hidden")
    logger.info("hidden")
    logger.warning("shown")

    lines = stream.getvalue().strip().splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["event"] == "shown"


# ============================================================
# ERROR LOGGING TESTS
# ============================================================


def test_log_error_includes_code_and_correlation_id(stream_logging):
    error = DeclarationNotFoundError("Vehicle")

    LoggingService.log_error(error, context={"directory": "/src"})

    record = _last_record(stream_logging)
    assert record["event"] == "error_occurred"
    assert record["level"] == "error"
    assert record["error_type"] == "DeclarationNotFoundError"
    assert record["error_code"] == "EXTR_002"
    assert record["correlation_id"] == error.correlation_id
    assert record["directory"] == "/src"


def test_log_error_plain_exception(stream_logging):
    LoggingService.log_error(ValueError("bad"))

    record = _last_record(stream_logging)
    assert record["error_type"] == "ValueError"
    assert record["error_message"] == "bad"
    assert "error_code" not in record


# ============================================================
# LOGGER FACTORY TESTS
# ============================================================


def test_factory_configure_uses_settings_defaults():
    configure_logging()

    assert LoggingService._configured is True
    assert LoggingService._log_level == "WARNING"
    assert LoggingService._config.format == "console"


def test_factory_configure_explicit_level():
    configure_logging(level="DEBUG", format="json")

    assert LoggingService._log_level == "DEBUG"


def test_factory_get_logger_requires_configuration():
    with pytest.raises(RuntimeError):
        get_logger(__name__)
