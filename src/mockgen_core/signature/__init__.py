"""Go signature fragment parsing: tokenizer and type resolver.

License: MIT
"""

from .resolver import find_qualifiers, resolve_fragment, resolve_items, split_qualifier
from .tokenizer import FragmentItem, classify_token, split_fragment, tokenize_fragment

__all__ = [
    "FragmentItem",
    "split_fragment",
    "classify_token",
    "tokenize_fragment",
    "split_qualifier",
    "find_qualifiers",
    "resolve_items",
    "resolve_fragment",
]
