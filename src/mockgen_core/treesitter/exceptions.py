"""
Exception hierarchy for the tree-sitter layer.

Defines exception types raised while loading the Go grammar and parsing
source text.

License: MIT
"""

from typing import Optional

from mockgen_core.exceptions import ProcessingError


class TreeSitterError(ProcessingError):
    """
    Base exception for all tree-sitter related errors.

    Error Code: TS_001

    Example:
        raise TreeSitterError(
            message="Tree-sitter operation failed",
            details={"operation": "parse"}
        )
    """

    def __init__(
        self,
        message: str = "Tree-sitter operation failed",
        error_code: str = "TS_001",
        **kwargs,
    ):
        super().__init__(message=message, error_code=error_code, **kwargs)
        self.is_transient = False


class LanguageNotSupportedError(TreeSitterError):
    """
    Raised when a grammar is not available in tree-sitter-language-pack.

    Error Code: TS_002

    Attributes:
        language: The unsupported language identifier
    """

    def __init__(
        self,
        language: str,
        message: Optional[str] = None,
        error_code: str = "TS_002",
        **kwargs,
    ):
        self.language = language
        if message is None:
            message = f"Language '{language}' is not supported by tree-sitter-language-pack"

        details = kwargs.pop("details", {})
        details["language"] = language

        super().__init__(message=message, error_code=error_code, details=details, **kwargs)


class ParseError(TreeSitterError):
    """
    Raised when tree-sitter rejects the source text.

    Tree-sitter always produces a tree; a tree containing ERROR or
    MISSING nodes is reported as a parse failure.

    Error Code: TS_003

    Attributes:
        file_path: Path of the parsed file, or "<source>" for in-memory text
        parse_details: Description of the failure (e.g. first error position)

    Example:
        raise ParseError(
            file_path="vehicle.go",
            parse_details="syntax error at line 4, column 2"
        )
    """

    def __init__(
        self,
        file_path: str = "<source>",
        parse_details: Optional[str] = None,
        message: Optional[str] = None,
        error_code: str = "TS_003",
        **kwargs,
    ):
        self.file_path = file_path
        self.parse_details = parse_details

        if message is None:
            if parse_details:
                message = f"Failed to parse '{file_path}': {parse_details}"
            else:
                message = f"Failed to parse '{file_path}'"

        details = kwargs.pop("details", {})
        details["file_path"] = file_path
        if parse_details:
            details["parse_details"] = parse_details

        super().__init__(message=message, error_code=error_code, details=details, **kwargs)
        self.is_transient = False  # Syntax errors are not retryable


__all__ = [
    "TreeSitterError",
    "LanguageNotSupportedError",
    "ParseError",
]
