"""
go-mockgen-tool core.

Locates a Go interface in source text, extracts its method signatures
and embedded interfaces, and renders a mock implementation. Contains:
- Data models and exception hierarchy
- Configuration management
- Logging service
- Signature tokenizer and type resolver
- Tree-sitter based interface extraction
- Mock synthesis

License: MIT
"""

from .config import MockgenSettings, get_config_summary, settings
from .exceptions import (
    DeclarationNotFoundError,
    ExtractionError,
    GenerationError,
    MalformedFragmentError,
    MockgenError,
    ProcessingError,
    ValidationError,
)
from .logging_service import LoggingConfig, LoggingService
from .models import EmbeddedRef, ImportEntry, Method, TypeData, TypeRef

__version__ = "1.0.0"


def __getattr__(name):
    """Lazy import for pipeline entry points to keep tree-sitter off the import path."""
    if name in ("extract", "synthesize", "find_type_data", "default_output_path"):
        from . import pipeline

        return getattr(pipeline, name)
    elif name == "write_mock_type":
        from .generator import write_mock_type

        return write_mock_type
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "MockgenSettings",
    "get_config_summary",
    "settings",
    "MockgenError",
    "ValidationError",
    "ProcessingError",
    "ExtractionError",
    "DeclarationNotFoundError",
    "MalformedFragmentError",
    "GenerationError",
    "LoggingConfig",
    "LoggingService",
    "TypeRef",
    "Method",
    "EmbeddedRef",
    "ImportEntry",
    "TypeData",
    "extract",
    "synthesize",
    "find_type_data",
    "default_output_path",
    "write_mock_type",
]
