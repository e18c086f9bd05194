"""Interface extractors.

Classes:
    BaseInterfaceExtractor: Abstract base class for all extractors.
    GoInterfaceExtractor: Extracts a Go interface's methods and embeds.
    InterfaceLocator: Finds a named interface body in a syntax tree.
    LocatorState: States of the declaration lookup.

License: MIT
"""

from .base import BaseInterfaceExtractor
from .go import GoInterfaceExtractor, InterfaceLocator, LocatorState, iter_named_preorder

__all__ = [
    "BaseInterfaceExtractor",
    "GoInterfaceExtractor",
    "InterfaceLocator",
    "LocatorState",
    "iter_named_preorder",
]
