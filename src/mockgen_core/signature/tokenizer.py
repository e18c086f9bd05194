"""
Fragment tokenizer for Go parameter and result lists.

Splits a comma-joined fragment such as ``"err1, err2 pkg.Error"`` or
``"int, func(a, b int) pkg.Error"`` into items, where each item is either
a bare type or a ``(name, type)`` pair. Commas nested inside brackets
(inline function types, generic arguments, struct literals) never split
the outer list.

License: MIT
"""

import re
from dataclasses import dataclass
from typing import List, Optional

import structlog

from ..exceptions import MalformedFragmentError

logger = structlog.get_logger(__name__)

# Inline function-type literal: "func(", "func (" ...
FUNC_TYPE_PATTERN = re.compile(r"^func\s*\(")

# Leading identifier of a token
IDENTIFIER_PATTERN = re.compile(r"[^\W\d]\w*")

# Keywords that begin a type and can never be a parameter name
TYPE_KEYWORDS = frozenset({"chan", "func", "interface", "map", "struct"})

OPENING_BRACKETS = "([{"
CLOSING_BRACKETS = ")]}"


@dataclass(frozen=True)
class FragmentItem:
    """One declared item of a fragment.

    Attributes:
        type_text: Type text; for a name-only item (``a`` in ``a, b int``)
            this holds the lone word, which the resolver treats as a name.
        name: Declared name when the item was split into name and type.
    """

    type_text: str
    name: Optional[str] = None

    @property
    def has_name(self) -> bool:
        return self.name is not None


def split_fragment(fragment: str) -> List[str]:
    """
    Split a fragment at commas that are not nested inside brackets.

    Args:
        fragment: Comma-joined list text, without the enclosing parentheses.

    Returns:
        Raw tokens in order (not stripped).

    Raises:
        MalformedFragmentError: If brackets are unbalanced.
    """
    tokens: List[str] = []
    current: List[str] = []
    depth = 0

    for char in fragment:
        if char in OPENING_BRACKETS:
            depth += 1
        elif char in CLOSING_BRACKETS:
            depth -= 1
            if depth < 0:
                raise MalformedFragmentError(fragment, "unmatched closing bracket")
        elif char == "," and depth == 0:
            tokens.append("".join(current))
            current = []
            continue
        current.append(char)

    if depth > 0:
        raise MalformedFragmentError(fragment, "unclosed bracket")

    tokens.append("".join(current))
    return tokens


def _is_type_only(text: str) -> bool:
    """True if the token cannot start with a parameter name."""
    if FUNC_TYPE_PATTERN.match(text):
        return True

    # *T, []T, <-chan T, ...T
    head = IDENTIFIER_PATTERN.match(text)
    if head is None:
        return True

    return head.group(0) in TYPE_KEYWORDS


def _first_top_level_whitespace(text: str) -> int:
    depth = 0
    for index, char in enumerate(text):
        if char in OPENING_BRACKETS:
            depth += 1
        elif char in CLOSING_BRACKETS:
            depth -= 1
        elif char.isspace() and depth == 0:
            return index
    return -1


def classify_token(token: str) -> FragmentItem:
    """
    Turn one raw token into a FragmentItem.

    Surrounding whitespace is stripped; the type text is otherwise kept as
    written, so multi-line struct and func types survive. Inline function
    types and other tokens that begin with a type are kept whole; anything
    else is split at its first top-level whitespace into name and type.

    Args:
        token: A single token produced by split_fragment().

    Returns:
        FragmentItem with or without a name.
    """
    text = token.strip()

    if _is_type_only(text):
        return FragmentItem(type_text=text)

    split_index = _first_top_level_whitespace(text)
    if split_index == -1:
        return FragmentItem(type_text=text)

    name = text[:split_index]
    type_text = text[split_index:].strip()
    return FragmentItem(type_text=type_text, name=name)


def tokenize_fragment(fragment: str) -> List[FragmentItem]:
    """
    Tokenize a parameter or result fragment into items.

    An empty fragment yields a single empty item so that zero-parameter
    and zero-result shapes look alike; callers filter it out.

    Args:
        fragment: Comma-joined list text, e.g. "a, b int, c string".

    Returns:
        FragmentItems in source order.

    Raises:
        MalformedFragmentError: On unbalanced brackets or empty items.

    Examples:
        >>> tokenize_fragment("err1, err2 pkg.Error")
        [FragmentItem(type_text='err1', name=None), FragmentItem(type_text='pkg.Error', name='err2')]
    """
    if not fragment.strip():
        return [FragmentItem(type_text="")]

    tokens = split_fragment(fragment)

    # Go permits a trailing comma in multi-line lists
    if len(tokens) > 1 and not tokens[-1].strip():
        tokens.pop()

    items: List[FragmentItem] = []
    for token in tokens:
        if not token.strip():
            raise MalformedFragmentError(fragment, "empty item")
        items.append(classify_token(token))

    logger.debug("fragment_tokenized", fragment=fragment, item_count=len(items))
    return items


__all__ = [
    "FragmentItem",
    "FUNC_TYPE_PATTERN",
    "split_fragment",
    "classify_token",
    "tokenize_fragment",
]
