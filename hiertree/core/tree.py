from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from hiertree.core.elements import PathElement
from hiertree.core.errors import DuplicatePathError, InvalidPathError
from hiertree.core.paths import has_prefix, path_sort_key, validate_components

logger = logging.getLogger(__name__)

_Item = tuple[tuple[str, ...], PathElement]


@dataclass(frozen=True)
class Node:
    """One position in the tree. ``element`` is None for stub nodes."""

    name: str
    element: PathElement | None = None
    children: tuple["Node", ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_stub(self) -> bool:
        return self.element is None


@dataclass
class _Pending:
    name: str
    element: PathElement | None = None
    children: tuple[Node, ...] = ()

    def freeze(self) -> Node:
        return Node(self.name, self.element, self.children)


def build_tree(elements: Iterable[PathElement], *, max_depth: int | None = None) -> list[Node]:
    """Arrange elements into a forest based on their hierarchical paths.

    Elements are sorted by path once, then each level is partitioned in a
    single sweep: siblings sharing a first component are contiguous, so a
    recursive call consumes a node's whole subtree and reports how many
    elements it used.

    Raises InvalidPathError for empty paths, empty components or paths deeper
    than ``max_depth``, and DuplicatePathError when two elements share a path.
    Nothing is returned on error.
    """
    items: list[_Item] = [(validate_components(e.path_components() or (), max_depth), e) for e in elements]
    items.sort(key=lambda item: path_sort_key(item[0]))

    nodes, consumed = _build(items, 0, ())
    logger.debug("built %d root nodes from %d elements", len(nodes), consumed)
    return nodes


def _build(
    items: list[_Item],
    start: int,
    prefix: tuple[str, ...],
) -> tuple[list[Node], int]:
    nodes: list[Node] = []
    pending: _Pending | None = None
    depth = len(prefix)

    i = start
    while i < len(items):
        path, element = items[i]
        if not has_prefix(path, prefix):
            break

        relpath = path[depth:]
        # unreachable on a sorted window: an exact-prefix path sorts before the recursion start
        if not relpath:
            raise InvalidPathError(path)
        root, rest = relpath[0], relpath[1:]

        if pending is not None and pending.name == root and not rest:
            raise DuplicatePathError(path)
        if pending is None or pending.name != root:
            if pending is not None:
                nodes.append(pending.freeze())
            pending = _Pending(root)

        if not rest:
            pending.element = element
            i += 1
            continue

        children, used = _build(items, i, prefix + (root,))
        pending.children = tuple(children)
        i += used

    if pending is not None:
        nodes.append(pending.freeze())
    return nodes, i - start
