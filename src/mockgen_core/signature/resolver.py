"""
Type resolution for tokenized Go signature fragments.

Turns FragmentItems into TypeRefs, applying Go's shared-type shorthand
("a, b int" declares both a and b as int) by carrying the nearest
explicit type backward over name-only items.

License: MIT
"""

import re
from typing import List, Optional, Set, Tuple

import structlog

from ..models import TypeRef
from .tokenizer import FUNC_TYPE_PATTERN, FragmentItem, tokenize_fragment

logger = structlog.get_logger(__name__)

PLAIN_IDENTIFIER_PATTERN = re.compile(r"^[^\W\d]\w*$")

# "pkg." followed by an identifier, anywhere in a type text
QUALIFIER_PATTERN = re.compile(r"(?<!\w)([^\W\d]\w*)\.(?=[^\W\d])")


def split_qualifier(type_text: str) -> Tuple[Optional[str], str]:
    """
    Split a type text into (qualifier, base_name).

    Only a plain ``pkg.Name`` is split. Inline function types and
    composite types such as ``*pkg.T`` or ``[]pkg.T`` keep their whole
    text as base name; their dots belong to nested types.

    Args:
        type_text: Type text as written in the source.

    Returns:
        Tuple of (qualifier or None, base_name).
    """
    if FUNC_TYPE_PATTERN.match(type_text):
        return None, type_text

    qualifier, dot, base_name = type_text.partition(".")
    if not dot or not base_name or not PLAIN_IDENTIFIER_PATTERN.match(qualifier):
        return None, type_text

    return qualifier, base_name


def find_qualifiers(type_text: str) -> Set[str]:
    """
    Find every package qualifier referenced in a type text.

    Nested types are included, so ``func(r io.Reader) error`` yields
    ``{"io"}`` and ``map[string]*pkg.T`` yields ``{"pkg"}``.
    """
    return set(QUALIFIER_PATTERN.findall(type_text))


def _to_type_ref(
    type_text: str, declared_name: Optional[str], used_qualifiers: Optional[Set[str]]
) -> TypeRef:
    qualifier, base_name = split_qualifier(type_text)
    if used_qualifiers is not None:
        used_qualifiers.update(find_qualifiers(type_text))
    return TypeRef(qualifier=qualifier, base_name=base_name, declared_name=declared_name)


def resolve_items(
    items: List[FragmentItem], used_qualifiers: Optional[Set[str]] = None
) -> List[TypeRef]:
    """
    Resolve tokenized items into TypeRefs.

    Two shapes are handled:

    - The last item has no name: every item is a bare type, e.g. the
      results ``int, error``. One unnamed TypeRef per item.
    - The last item is named: items are walked from the end, keeping the
      most recent explicit type; a name-only item takes that type. The
      result is reversed back into source order.

    Args:
        items: Output of tokenize_fragment().
        used_qualifiers: Set that receives every package qualifier seen.

    Returns:
        TypeRefs in source order.
    """
    if not items or (len(items) == 1 and not items[0].type_text):
        return []

    if not items[-1].has_name:
        return [_to_type_ref(item.type_text, item.name, used_qualifiers) for item in items]

    resolved: List[TypeRef] = []
    current_type = items[-1].type_text
    for item in reversed(items):
        if item.has_name:
            current_type = item.type_text
            resolved.append(_to_type_ref(current_type, item.name, used_qualifiers))
        else:
            # name-only item: its single word is the name
            resolved.append(_to_type_ref(current_type, item.type_text, used_qualifiers))

    resolved.reverse()
    return resolved


def resolve_fragment(fragment: str, used_qualifiers: Optional[Set[str]] = None) -> List[TypeRef]:
    """
    Tokenize and resolve a parameter or result fragment.

    Args:
        fragment: Comma-joined list text, e.g. "err1, err2 pkg.Error".
        used_qualifiers: Set that receives every package qualifier seen.

    Returns:
        TypeRefs in source order; empty for a blank fragment.

    Raises:
        MalformedFragmentError: If the fragment cannot be tokenized.

    Examples:
        >>> [t.full_type_name for t in resolve_fragment("err1, err2 pkg.Error")]
        ['pkg.Error', 'pkg.Error']
    """
    if not fragment.strip():
        return []

    type_refs = resolve_items(tokenize_fragment(fragment), used_qualifiers)
    logger.debug("fragment_resolved", fragment=fragment, type_count=len(type_refs))
    return type_refs


__all__ = [
    "split_qualifier",
    "find_qualifiers",
    "resolve_items",
    "resolve_fragment",
]
