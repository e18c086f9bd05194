"""
Exception hierarchy for go-mockgen-tool.

Defines all exception types with error codes, transient flags, and correlation IDs.

License: MIT
"""

import uuid
from typing import Any, Dict, Optional


class MockgenError(Exception):
    """
    Base exception for all go-mockgen-tool errors.

    All mockgen exceptions inherit from this class. Provides standard
    error attributes: message, error_code, details, correlation_id.

    Attributes:
        message: Human-readable error message
        error_code: Programmatic error code (e.g., "EXTR_002")
        details: Additional context (dict)
        correlation_id: UUID for tracing across layers
        original_exception: Wrapped exception (if any)
        is_transient: Whether error is transient (retryable)

    Example:
        raise MockgenError(
            message="Operation failed",
            error_code="ERR_UNKNOWN",
            details={"interface": "Vehicle"},
        )
    """

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_UNKNOWN",
        details: Optional[Dict[str, Any]] = None,
        correlation_id: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        Initialize MockgenError.

        Args:
            message: Error message
            error_code: Error code for programmatic handling
            details: Additional context dict
            correlation_id: UUID for request tracing
            original_exception: Original wrapped exception
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.correlation_id = correlation_id or str(uuid.uuid4())
        self.original_exception = original_exception
        self.is_transient = False  # Default: not retryable

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for logging/serialization.

        Returns:
            Dictionary with all error information
        """
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "correlation_id": self.correlation_id,
            "original_error": str(self.original_exception) if self.original_exception else None,
        }


class ValidationError(MockgenError):
    """
    Raised when caller input is invalid.

    Error Codes:
        VAL_001: Missing required value (e.g., empty interface name)
        VAL_002: Source directory does not exist

    Not transient (user input errors should not be retried).
    """

    def __init__(self, message: str, error_code: str = "VAL_001", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)
        self.is_transient = False


class ProcessingError(MockgenError):
    """
    Base exception for failures while processing source text.

    Error Codes:
        PROC_001: Generic processing failure

    Not transient by default (processing logic errors).
    """

    def __init__(self, message: str, error_code: str = "PROC_001", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)
        self.is_transient = False


class ExtractionError(ProcessingError):
    """
    Base exception for interface extraction failures.

    Error Codes:
        EXTR_001: Extraction failed
        EXTR_002: Interface declaration not found
        EXTR_003: Malformed signature fragment
    """

    def __init__(self, message: str, error_code: str = "EXTR_001", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)


class DeclarationNotFoundError(ExtractionError):
    """
    Raised when the requested interface is not declared in the source text.

    Also raised when the name is declared but does not name an interface
    body (e.g. a struct). Callers scanning several files treat this as
    "try the next file".

    Error Code: EXTR_002

    Attributes:
        interface_name: The interface that was looked up
    """

    def __init__(
        self,
        interface_name: str,
        message: Optional[str] = None,
        error_code: str = "EXTR_002",
        **kwargs,
    ):
        self.interface_name = interface_name
        if message is None:
            message = f"Interface type '{interface_name}' not found"

        details = kwargs.pop("details", {})
        details["interface_name"] = interface_name

        super().__init__(message=message, error_code=error_code, details=details, **kwargs)


class MalformedFragmentError(ExtractionError):
    """
    Raised when a parameter or result fragment cannot be tokenized.

    Unbalanced nesting or empty list items are structural defects; the
    fragment is rejected rather than split on a guess.

    Error Code: EXTR_003

    Attributes:
        fragment: The offending fragment text
    """

    def __init__(
        self,
        fragment: str,
        reason: str,
        message: Optional[str] = None,
        error_code: str = "EXTR_003",
        **kwargs,
    ):
        self.fragment = fragment
        self.reason = reason
        if message is None:
            message = f"Malformed signature fragment {fragment!r}: {reason}"

        details = kwargs.pop("details", {})
        details["fragment"] = fragment
        details["reason"] = reason

        super().__init__(message=message, error_code=error_code, details=details, **kwargs)


class GenerationError(MockgenError):
    """
    Raised when a rendered mock cannot be written to its destination.

    Error Codes:
        GEN_001: Output file could not be written
    """

    def __init__(self, message: str, error_code: str = "GEN_001", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)
        self.is_transient = False


__all__ = [
    "MockgenError",
    "ValidationError",
    "ProcessingError",
    "ExtractionError",
    "DeclarationNotFoundError",
    "MalformedFragmentError",
    "GenerationError",
]
