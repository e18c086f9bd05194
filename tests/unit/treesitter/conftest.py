"""
Fixtures for tree-sitter tests.

Provides a Go parse factory and sample sources shared by the parser,
span and extractor tests.
"""

import pytest
from tree_sitter import Tree
from tree_sitter_language_pack import get_parser


@pytest.fixture
def parse_go():
    """Factory fixture to parse Go source code."""
    parser = get_parser("go")

    def _parse(source: str) -> tuple[Tree, bytes]:
        source_bytes = source.encode("utf-8")
        tree = parser.parse(source_bytes)
        return tree, source_bytes

    return _parse


@pytest.fixture
def go_source_code() -> bytes:
    """Small, valid Go file."""
    return b"""package shapes

import "math"

type Shape interface {
	Area() float64
}

func Circle(r float64) float64 {
	return math.Pi * r * r
}
"""
