"""
Tree-sitter parser module.

Exports:
    BaseLanguageParser: Abstract base class for language parsers.
    GoParser: Parser for Go source text.
"""

from mockgen_core.treesitter.parser.base import BaseLanguageParser
from mockgen_core.treesitter.parser.go import GoParser

__all__ = [
    "BaseLanguageParser",
    "GoParser",
]
