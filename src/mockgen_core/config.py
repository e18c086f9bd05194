"""
Configuration Management for go-mockgen-tool.

Provides centralized, type-safe configuration loading using Pydantic Settings.
Supports environment variables (MOCKGEN_ prefix), .env files, and sensible
defaults for zero-config operation.

License: MIT
"""

from typing import Any, Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class MockgenSettings(BaseSettings):
    """
    Centralized configuration for the mock generator.

    Configuration is loaded with the following priority (highest to lowest):
    1. System environment variables (MOCKGEN_LOG_LEVEL, ...)
    2. .env file in the working directory
    3. Hardcoded default values

    Example:
        ```python
        from mockgen_core.config import settings

        settings.output_template  # '{name}_mock.go'
        settings.output_file_name("Vehicle")  # 'vehicle_mock.go'
        ```
    """

    # ========================================
    # LOGGING CONFIGURATION
    # ========================================

    log_level: str = Field(
        default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_format: str = Field(default="console", description="Log format (json, console)")

    # ========================================
    # GENERATION
    # ========================================

    generator_name: str = Field(
        default="go-mockgen-tool",
        min_length=1,
        description="Tool name written into the 'Code generated ... DO NOT EDIT.' header",
    )

    output_template: str = Field(
        default="{name}_mock.go",
        description="Output file name template; {name} is the lowercased interface name",
    )

    output_file_mode: int = Field(
        default=0o664, ge=0, le=0o777, description="Permission bits for written mock files"
    )

    # ========================================
    # SOURCE SCANNING
    # ========================================

    source_extension: str = Field(
        default=".go", description="Extension of source files scanned for the interface"
    )

    skip_test_files: bool = Field(
        default=False, description="Do not scan *_test.go files for the interface"
    )

    # ========================================
    # VALIDATORS
    # ========================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate log level is one of allowed values.

        Args:
            v: Log level string (case-insensitive)

        Returns:
            Uppercase log level string

        Raises:
            ValueError: If log level not in allowed values
        """
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got '{v}'")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """
        Validate log format is one of allowed values.

        Args:
            v: Log format string (case-insensitive)

        Returns:
            Lowercase log format string

        Raises:
            ValueError: If log format not in allowed values
        """
        allowed = ["json", "console"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"log_format must be one of {allowed}, got '{v}'")
        return v_lower

    @field_validator("output_template")
    @classmethod
    def validate_output_template(cls, v: str) -> str:
        """Require the {name} placeholder so each interface gets its own file."""
        if "{name}" not in v:
            raise ValueError(f"output_template must contain '{{name}}', got '{v}'")
        return v

    @field_validator("source_extension")
    @classmethod
    def validate_source_extension(cls, v: str) -> str:
        if not v.startswith("."):
            raise ValueError(f"source_extension must start with '.', got '{v}'")
        return v

    # ========================================
    # COMPUTED VALUES
    # ========================================

    def output_file_name(self, interface_name: str) -> str:
        """
        Get the default output file name for an interface.

        Args:
            interface_name: Name of the mocked interface

        Returns:
            File name, e.g. 'vehicle_mock.go' for 'Vehicle'
        """
        return self.output_template.format(name=interface_name.lower())

    @property
    def is_development(self) -> bool:
        """True if log_level is DEBUG."""
        return self.log_level == "DEBUG"

    # ========================================
    # PYDANTIC CONFIGURATION
    # ========================================

    model_config = {
        "env_prefix": "MOCKGEN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "validate_assignment": True,
        "extra": "forbid",
    }


def get_config_summary(settings: MockgenSettings) -> Dict[str, Any]:
    """
    Get configuration summary for logging/debugging.

    Args:
        settings: MockgenSettings instance

    Returns:
        Configuration summary grouped by category
    """
    return {
        "generation": {
            "generator_name": settings.generator_name,
            "output_template": settings.output_template,
            "output_file_mode": oct(settings.output_file_mode),
        },
        "scanning": {
            "source_extension": settings.source_extension,
            "skip_test_files": settings.skip_test_files,
        },
        "logging": {
            "level": settings.log_level,
            "format": settings.log_format,
        },
    }


# Singleton instance - instantiated once at module import
settings = MockgenSettings()
