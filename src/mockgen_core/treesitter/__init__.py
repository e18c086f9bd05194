"""
Tree-sitter layer for go-mockgen-tool.

Parses Go source with the tree-sitter-language-pack grammar and extracts
the members of a named interface.

Key components:
- config: Go node type names
- exceptions: Tree-sitter specific exceptions
- span: Byte-span to source text extraction
- parser: Go parser
- extractors: Interface locator and member collector
"""

from mockgen_core.treesitter.exceptions import (
    LanguageNotSupportedError,
    ParseError,
    TreeSitterError,
)
from mockgen_core.treesitter.extractors import (
    BaseInterfaceExtractor,
    GoInterfaceExtractor,
    InterfaceLocator,
    LocatorState,
)
from mockgen_core.treesitter.parser import BaseLanguageParser, GoParser
from mockgen_core.treesitter.span import node_text, span_text

__all__ = [
    # Exceptions
    "TreeSitterError",
    "LanguageNotSupportedError",
    "ParseError",
    # Parser
    "BaseLanguageParser",
    "GoParser",
    # Extractors
    "BaseInterfaceExtractor",
    "GoInterfaceExtractor",
    "InterfaceLocator",
    "LocatorState",
    # Span
    "node_text",
    "span_text",
]
