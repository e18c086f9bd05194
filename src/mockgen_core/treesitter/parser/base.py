"""
Base classes for Tree-sitter language parsers.

Provides abstract base class for implementing language-specific parsers
using tree-sitter and tree-sitter-language-pack.

License: MIT
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

import structlog
from tree_sitter import Node, Parser, Tree
from tree_sitter_language_pack import get_language, get_parser

from ..exceptions import LanguageNotSupportedError, ParseError

logger = structlog.get_logger(__name__)


class BaseLanguageParser(ABC):
    """
    Abstract base class for language-specific tree-sitter parsers.

    Subclasses define the language name. Unlike a lenient indexer, a
    syntax error is reported as ParseError: signatures cut out of a broken
    tree cannot be trusted.

    Example:
        class GoParser(BaseLanguageParser):
            @property
            def language_name(self) -> str:
                return "go"

        tree = GoParser().parse(b"package main")
    """

    def __init__(self) -> None:
        """
        Initialize the parser with tree-sitter language support.

        Raises:
            LanguageNotSupportedError: If the language is not supported by
                tree-sitter-language-pack.
        """
        self._parser: Optional[Parser] = None
        self._log = logger.bind(parser=self.__class__.__name__)

        try:
            _ = get_language(self.language_name)  # type: ignore[arg-type]
            self._log.debug("language_validated", language=self.language_name)
        except Exception as e:
            self._log.error(
                "language_not_supported",
                language=self.language_name,
                error=str(e),
            )
            raise LanguageNotSupportedError(
                language=self.language_name,
                details={"error": str(e)},
            ) from e

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Language name as used by tree-sitter-language-pack (e.g. "go")."""
        ...

    def get_parser(self) -> Parser:
        """
        Get the configured tree-sitter Parser instance.

        Lazily initializes the parser on first call.
        """
        if self._parser is None:
            self._parser = get_parser(self.language_name)  # type: ignore[arg-type]
            self._log.debug("parser_initialized", language=self.language_name)
        return self._parser

    def parse(self, source_code: bytes, file_path: str = "<source>") -> Tree:
        """
        Parse source code into a syntax tree.

        Args:
            source_code: Source code as bytes (UTF-8 encoded).
            file_path: Name used in error reports.

        Returns:
            Parsed Tree without syntax errors.

        Raises:
            ParseError: If tree-sitter fails or the tree contains errors.
        """
        try:
            tree = self.get_parser().parse(source_code)
        except Exception as e:
            self._log.error(
                "parse_failed",
                language=self.language_name,
                source_length=len(source_code),
                error=str(e),
            )
            raise ParseError(file_path=file_path, parse_details=str(e), original_exception=e) from e

        if tree.root_node.has_error:
            error_node = self._first_error_node(tree.root_node)
            details = "syntax error"
            if error_node is not None:
                row, column = error_node.start_point
                details = f"syntax error at line {row + 1}, column {column + 1}"
            self._log.warning(
                "parse_has_errors",
                language=self.language_name,
                file_path=file_path,
                details=details,
            )
            raise ParseError(file_path=file_path, parse_details=details)

        self._log.debug(
            "parse_success",
            language=self.language_name,
            file_path=file_path,
            source_length=len(source_code),
        )
        return tree

    @staticmethod
    def _first_error_node(root: Node) -> Optional[Node]:
        for node in _iter_nodes(root):
            if node.type == "ERROR" or node.is_missing:
                return node
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(language='{self.language_name}')"


def _iter_nodes(root: Node) -> Iterator[Node]:
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


__all__ = ["BaseLanguageParser"]
