"""Base classes for interface extraction from AST.

Defines the abstract base class for extractors that turn a tree-sitter
tree into TypeData for one named interface.
"""

from abc import ABC, abstractmethod

from tree_sitter import Node, Tree

from ...models import TypeData
from ..span import node_text


class BaseInterfaceExtractor(ABC):
    """Abstract base class for extracting an interface's methods from AST trees.

    Subclasses implement the language-specific lookup of the declaration
    and the collection of its members.
    """

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the programming language (e.g. "go")."""
        ...

    @abstractmethod
    def extract_type_data(self, tree: Tree, source: bytes, interface_name: str) -> TypeData:
        """Extract methods, embeds and needed imports of one interface.

        Args:
            tree: Parsed tree-sitter AST tree.
            source: Original source code as bytes.
            interface_name: Name of the interface to extract.

        Returns:
            TypeData for the interface.

        Raises:
            DeclarationNotFoundError: If no such interface is declared.
        """
        ...

    def _get_node_text(self, node: Node, source: bytes) -> str:
        """Extract text content of a node from source bytes."""
        return node_text(node, source)
