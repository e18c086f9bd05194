"""Source span extraction.

Tree-sitter nodes carry byte offsets into the parsed source but not
literal text for every compound type, so text is cut from the source.
"""

from tree_sitter import Node


def span_text(source: bytes, start_byte: int, end_byte: int) -> str:
    """
    Return ``source[start_byte:end_byte]`` decoded as UTF-8.

    Offsets are 0-based and end-exclusive. They come from the parser, so
    an out-of-range span is a programming error.

    Raises:
        IndexError: If the span does not lie within the source.
    """
    if not 0 <= start_byte <= end_byte <= len(source):
        raise IndexError(
            f"span [{start_byte}:{end_byte}] outside source of {len(source)} bytes"
        )
    return source[start_byte:end_byte].decode("utf-8", errors="replace")


def node_text(node: Node, source: bytes) -> str:
    """Return the exact source text covered by a node."""
    return span_text(source, node.start_byte, node.end_byte)


__all__ = ["span_text", "node_text"]
