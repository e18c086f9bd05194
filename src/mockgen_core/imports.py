"""
Import pruning.

The generated mock only needs the imports whose package names appear as
qualifiers in the collected method signatures and embedded interfaces.

License: MIT
"""

from typing import Iterable, List

import structlog

from .models import ImportEntry

logger = structlog.get_logger(__name__)


def unquote_import_path(literal: str) -> str:
    """Strip the quotes of an interpreted ("...") or raw (`...`) string literal."""
    if len(literal) >= 2 and literal[0] == literal[-1] and literal[0] in "\"`":
        return literal[1:-1]
    return literal


def prune_imports(imports: Iterable[ImportEntry], used_qualifiers: Iterable[str]) -> List[ImportEntry]:
    """
    Keep only imports whose short name is a used qualifier.

    Original order is preserved. Two imports sharing a short name are
    both kept when that name is used.

    Args:
        imports: All imports of the file.
        used_qualifiers: Package qualifiers referenced by collected types.

    Returns:
        The retained imports.

    Example:
        >>> entries = [ImportEntry(path="io"), ImportEntry(path="os", alias="osfs")]
        >>> [e.path for e in prune_imports(entries, {"osfs"})]
        ['os']
    """
    used = set(used_qualifiers)
    all_imports = list(imports)
    retained = [entry for entry in all_imports if entry.short_name in used]

    logger.debug(
        "imports_pruned",
        total=len(all_imports),
        retained=len(retained),
        used_qualifiers=sorted(used),
    )
    return retained


__all__ = ["unquote_import_path", "prune_imports"]
