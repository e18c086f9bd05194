"""
Go interface extractor.

Locates a named interface declaration in a Go syntax tree and collects
its members:
- Methods, with parameter and result lists resolved to TypeRefs
- Embedded interfaces from the same package (``SecondInterface``)
- Embedded interfaces from other packages (``io.Writer``)

Imports of the file are collected and pruned to the packages the
collected members reference.

License: MIT
"""

from enum import Enum
from typing import Iterator, List, Optional, Set, Tuple

import structlog
from tree_sitter import Node, Tree

from ...exceptions import DeclarationNotFoundError
from ...imports import prune_imports, unquote_import_path
from ...models import EmbeddedRef, ImportEntry, Method, TypeData
from ...signature import resolve_fragment
from ..config import (
    GO_COMMENT_TYPES,
    GO_IMPORT_SPEC_TYPES,
    GO_INTERFACE_TYPES,
    GO_LANGUAGE,
    GO_LOCAL_EMBED_TYPES,
    GO_MEMBER_LIST_TYPES,
    GO_METHOD_TYPES,
    GO_PACKAGE_CLAUSE_TYPES,
    GO_PARAMETER_LIST_TYPES,
    GO_PARAMETER_TYPES,
    GO_QUALIFIED_EMBED_TYPES,
    GO_TYPE_DECLARATION_TYPES,
    GO_TYPE_ELEM_TYPES,
    GO_TYPE_NAME_TYPES,
)
from ..exceptions import ParseError
from ..span import node_text, span_text
from .base import BaseInterfaceExtractor

logger = structlog.get_logger(__name__)


class LocatorState(str, Enum):
    """States of the declaration lookup."""

    SEARCHING = "searching"
    FOUND = "found"
    DONE = "done"


def iter_named_preorder(root: Node) -> Iterator[Node]:
    """Yield named nodes depth-first, parents before children, in source order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.named_children))


class InterfaceLocator:
    """
    Finds the interface body declared under a given name.

    Walks named nodes in depth-first order. A type declaration name
    equal to the requested name moves the state to FOUND; the very next
    node (comments aside) must be an interface body, which moves the
    state to DONE and ends the walk. Anything else means the name
    declares something that is not an interface, and the search resumes.

    The first matching declaration in traversal order wins; a second
    declaration of the same name in another scope is never visited.

    Attributes:
        interface_name: Name being looked up.
        state: Current LocatorState.
    """

    def __init__(self, source: bytes, interface_name: str) -> None:
        self.interface_name = interface_name
        self.state = LocatorState.SEARCHING
        self._source = source
        self._log = logger.bind(interface=interface_name)

    def locate(self, root: Node) -> Node:
        """
        Return the interface_type node for the requested name.

        Raises:
            DeclarationNotFoundError: If the walk ends before DONE.
        """
        for node in iter_named_preorder(root):
            if self.state is LocatorState.FOUND:
                if node.type in GO_COMMENT_TYPES:
                    continue
                if node.type in GO_INTERFACE_TYPES:
                    self.state = LocatorState.DONE
                    self._log.debug(
                        "interface_located",
                        line=node.start_point[0] + 1,
                        start_byte=node.start_byte,
                    )
                    return node
                self._log.debug("declaration_not_interface", node_type=node.type)
                self.state = LocatorState.SEARCHING

            if self.state is LocatorState.SEARCHING and self._is_declared_name(node):
                self.state = LocatorState.FOUND

        self._log.debug("interface_not_found", final_state=self.state.value)
        raise DeclarationNotFoundError(self.interface_name)

    def _is_declared_name(self, node: Node) -> bool:
        if node.type not in GO_TYPE_NAME_TYPES:
            return False

        parent = node.parent
        if parent is None or parent.type not in GO_TYPE_DECLARATION_TYPES:
            return False

        name_node = parent.child_by_field_name("name")
        if name_node is None or name_node.start_byte != node.start_byte:
            return False

        return node_text(node, self._source) == self.interface_name


class GoInterfaceExtractor(BaseInterfaceExtractor):
    """
    Extracts TypeData for a Go interface.

    Example:
        >>> from mockgen_core.treesitter.parser import GoParser
        >>> source = b'''
        ... package example
        ...
        ... type Vehicle interface {
        ...     Name() string
        ... }
        ... '''
        >>> tree = GoParser().parse(source)
        >>> data = GoInterfaceExtractor().extract_type_data(tree, source, "Vehicle")
        >>> data.methods[0].name
        'Name'
    """

    def __init__(self) -> None:
        """Initialize the Go extractor with logging."""
        super().__init__()
        self._log = logger.bind(extractor="GoInterfaceExtractor")

    @property
    def language_name(self) -> str:
        return GO_LANGUAGE

    # =========================================================================
    # Main Extraction
    # =========================================================================

    def extract_type_data(self, tree: Tree, source: bytes, interface_name: str) -> TypeData:
        root = tree.root_node

        body = InterfaceLocator(source, interface_name).locate(root)

        used_qualifiers: Set[str] = set()
        methods, embeds = self._collect_members(body, source, used_qualifiers)
        imports = prune_imports(self._collect_imports(root, source), used_qualifiers)

        type_data = TypeData(
            package_name=self._extract_package_name(root, source),
            imports=tuple(imports),
            methods=tuple(methods),
            embeds=tuple(embeds),
        )

        self._log.debug(
            "type_data_extracted",
            interface=interface_name,
            package=type_data.package_name,
            methods_count=len(type_data.methods),
            embeds_count=len(type_data.embeds),
            imports_count=len(type_data.imports),
        )
        return type_data

    # =========================================================================
    # Members
    # =========================================================================

    def _iter_members(self, body: Node) -> Iterator[Node]:
        for child in body.named_children:
            if child.type in GO_MEMBER_LIST_TYPES:
                yield from child.named_children
            else:
                yield child

    def _collect_members(
        self, body: Node, source: bytes, used_qualifiers: Set[str]
    ) -> Tuple[List[Method], List[EmbeddedRef]]:
        methods: List[Method] = []
        embeds: List[EmbeddedRef] = []

        for member in self._iter_members(body):
            if member.type in GO_COMMENT_TYPES:
                continue

            if member.type in GO_METHOD_TYPES:
                methods.extend(self._collect_methods(member, source, used_qualifiers))
                continue

            embed_node: Optional[Node] = member
            if member.type in GO_TYPE_ELEM_TYPES:
                embed_node = self._single_embedded_type(member)

            embed = None
            if embed_node is not None:
                embed = self._extract_embed(embed_node, source, used_qualifiers)

            if embed is None:
                # type sets (A | B, ~int) and generic embeds cannot be mocked
                self._log.warning(
                    "interface_member_skipped",
                    member_type=member.type,
                    text=self._get_node_text(member, source),
                )
                continue

            embeds.append(embed)
            self._log.debug("embed_collected", reference=embed.reference)

        return methods, embeds

    def _single_embedded_type(self, type_elem: Node) -> Optional[Node]:
        types = [child for child in type_elem.named_children if child.type not in GO_COMMENT_TYPES]
        if len(types) != 1:
            return None
        return types[0]

    def _extract_embed(
        self, node: Node, source: bytes, used_qualifiers: Set[str]
    ) -> Optional[EmbeddedRef]:
        # older grammars wrap the name in interface_type_name
        if node.type == "interface_type_name" and node.named_children:
            node = node.named_children[0]

        if node.type in GO_QUALIFIED_EMBED_TYPES:
            package_node = node.child_by_field_name("package")
            name_node = node.child_by_field_name("name")
            if package_node is None or name_node is None:
                return None
            qualifier = self._get_node_text(package_node, source)
            used_qualifiers.add(qualifier)
            return EmbeddedRef(name=self._get_node_text(name_node, source), qualifier=qualifier)

        if node.type in GO_LOCAL_EMBED_TYPES:
            return EmbeddedRef(name=self._get_node_text(node, source))

        return None

    def _collect_methods(
        self, member: Node, source: bytes, used_qualifiers: Set[str]
    ) -> List[Method]:
        """
        Build one Method per name declared by a method member.

        Parameter and result fragments are resolved once and shared by
        every name of the member.
        """
        names = [
            self._get_node_text(name_node, source)
            for name_node in member.children_by_field_name("name")
        ]

        parameters_fragment = self._parameter_list_fragment(
            member.child_by_field_name("parameters"), source
        )
        result_fragment = self._result_fragment(member.child_by_field_name("result"), source)

        parameters = tuple(resolve_fragment(parameters_fragment, used_qualifiers))
        returns = tuple(resolve_fragment(result_fragment, used_qualifiers))

        methods = [Method(name=name, parameters=parameters, returns=returns) for name in names]
        for method in methods:
            self._log.debug(
                "method_collected",
                name=method.name,
                parameters_count=len(method.parameters),
                returns_count=len(method.returns),
            )
        return methods

    def _parameter_list_fragment(self, list_node: Optional[Node], source: bytes) -> str:
        """
        Join the declarations of a parameter list into one fragment.

        Each declaration's span is cut from the source with its comments
        removed, so neither comments nor a trailing comma inside the list
        reach the tokenizer.
        """
        if list_node is None:
            return ""
        return ", ".join(
            self._text_without_comments(child, source)
            for child in list_node.named_children
            if child.type in GO_PARAMETER_TYPES
        )

    def _result_fragment(self, result_node: Optional[Node], source: bytes) -> str:
        if result_node is None:
            return ""
        if result_node.type in GO_PARAMETER_LIST_TYPES:
            return self._parameter_list_fragment(result_node, source)
        # single unparenthesized result type
        return self._text_without_comments(result_node, source)

    def _text_without_comments(self, node: Node, source: bytes) -> str:
        """Source text of a node with the byte ranges of nested comments cut out."""
        pieces = []
        cursor = node.start_byte
        for child in iter_named_preorder(node):
            if child.type in GO_COMMENT_TYPES and child.start_byte >= cursor:
                pieces.append(span_text(source, cursor, child.start_byte))
                cursor = child.end_byte
        pieces.append(span_text(source, cursor, node.end_byte))
        return "".join(pieces)

    # =========================================================================
    # File Level
    # =========================================================================

    def _extract_package_name(self, root: Node, source: bytes) -> str:
        for child in root.named_children:
            if child.type in GO_PACKAGE_CLAUSE_TYPES:
                for sub in child.named_children:
                    if sub.type == "package_identifier":
                        return self._get_node_text(sub, source)
        raise ParseError(parse_details="missing package clause")

    def _collect_imports(self, root: Node, source: bytes) -> List[ImportEntry]:
        """Collect every import spec of the file, single and grouped forms alike."""
        imports: List[ImportEntry] = []

        def visit(node: Node) -> None:
            if node.type in GO_IMPORT_SPEC_TYPES:
                path_node = node.child_by_field_name("path")
                if path_node is None:
                    return
                name_node = node.child_by_field_name("name")
                alias = None
                if name_node is not None:
                    alias = self._get_node_text(name_node, source)
                imports.append(
                    ImportEntry(
                        path=unquote_import_path(self._get_node_text(path_node, source)),
                        alias=alias,
                    )
                )
                return

            for child in node.named_children:
                visit(child)

        for child in root.named_children:
            if child.type == "import_declaration":
                visit(child)

        return imports


__all__ = [
    "GoInterfaceExtractor",
    "InterfaceLocator",
    "LocatorState",
    "iter_named_preorder",
]
