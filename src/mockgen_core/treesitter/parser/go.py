"""Go parser backed by the tree-sitter-language-pack Go grammar."""

from ..config import GO_LANGUAGE
from .base import BaseLanguageParser


class GoParser(BaseLanguageParser):
    """Parser for Go source files."""

    @property
    def language_name(self) -> str:
        return GO_LANGUAGE


__all__ = ["GoParser"]
