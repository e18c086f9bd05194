"""
Tree-sitter configuration for the Go grammar.

Node type names used by the declaration locator and the method collector.
Both the current grammar (method_elem / type_elem) and older releases
(method_spec / method_spec_list / interface_type_name) are listed.
"""

from typing import FrozenSet

GO_LANGUAGE = "go"

# =============================================================================
# DECLARATIONS
# =============================================================================

# Nodes whose "name" field declares a type name
GO_TYPE_DECLARATION_TYPES: FrozenSet[str] = frozenset({"type_spec", "type_alias"})

GO_TYPE_NAME_TYPES: FrozenSet[str] = frozenset({"type_identifier"})

GO_INTERFACE_TYPES: FrozenSet[str] = frozenset({"interface_type"})

# =============================================================================
# INTERFACE MEMBERS
# =============================================================================

GO_METHOD_TYPES: FrozenSet[str] = frozenset({"method_elem", "method_spec"})

# Wrapper nodes whose children are interface members
GO_MEMBER_LIST_TYPES: FrozenSet[str] = frozenset({"method_spec_list"})

# Wrapper nodes around embedded types / type-set constraints
GO_TYPE_ELEM_TYPES: FrozenSet[str] = frozenset({"type_elem", "constraint_elem"})

GO_LOCAL_EMBED_TYPES: FrozenSet[str] = frozenset({"type_identifier", "interface_type_name"})

GO_QUALIFIED_EMBED_TYPES: FrozenSet[str] = frozenset({"qualified_type"})

# =============================================================================
# SIGNATURES
# =============================================================================

GO_PARAMETER_LIST_TYPES: FrozenSet[str] = frozenset({"parameter_list"})

GO_PARAMETER_TYPES: FrozenSet[str] = frozenset(
    {"parameter_declaration", "variadic_parameter_declaration"}
)

# =============================================================================
# FILE LEVEL
# =============================================================================

GO_PACKAGE_CLAUSE_TYPES: FrozenSet[str] = frozenset({"package_clause"})

GO_IMPORT_SPEC_TYPES: FrozenSet[str] = frozenset({"import_spec"})

GO_COMMENT_TYPES: FrozenSet[str] = frozenset({"comment"})

