from __future__ import annotations

from collections.abc import Sequence
from functools import cmp_to_key

from hiertree.core.errors import InvalidPathError, PathTooDeepError

DEFAULT_DELIMITER = "/"


def split_path(raw: str, delimiter: str = DEFAULT_DELIMITER) -> tuple[str, ...]:
    """Split a delimited path into components.

    Empty segments are kept so that "", "/" and "a//" fail validation later
    instead of silently collapsing into a different path.
    """
    return tuple(raw.split(delimiter))


def join_path(components: Sequence[str], delimiter: str = DEFAULT_DELIMITER) -> str:
    return delimiter.join(components)


def has_prefix(path: Sequence[str], prefix: Sequence[str]) -> bool:
    if len(path) < len(prefix):
        return False
    return all(a == b for a, b in zip(path, prefix))


def compare_paths(a: Sequence[str] | None, b: Sequence[str] | None) -> int:
    """Compare two component sequences lexicographically.

    Returns -1, 0 or +1. A strict prefix sorts before its extensions and
    ``None`` is treated as the empty sequence.
    """
    a = a or ()
    b = b or ()
    for x, y in zip(a, b):
        if x < y:
            return -1
        if x > y:
            return 1
    if len(a) == len(b):
        return 0
    return -1 if len(a) < len(b) else 1


path_sort_key = cmp_to_key(compare_paths)


def validate_components(path: Sequence[str], max_depth: int | None = None) -> tuple[str, ...]:
    components = tuple(path)
    if not components or any(not isinstance(c, str) or not c for c in components):
        raise InvalidPathError(components)
    if max_depth is not None and len(components) > max_depth:
        raise PathTooDeepError(components)
    return components
