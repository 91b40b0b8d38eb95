from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from hiertree.core.elements import PathElement
from hiertree.core.tree import Node, build_tree


@dataclass(frozen=True)
class Entry:
    """A node seen from a flat listing. ``element`` is None for stubs."""

    parent: str
    name: str
    element: PathElement | None
    leaf: bool

    @property
    def path(self) -> str:
        return f"{self.parent}/{self.name}" if self.parent else self.name


def flatten(forest: Sequence[Node]) -> list[Entry]:
    """Pre-order walk of the forest; each node precedes its descendants."""
    entries: list[Entry] = []

    def _walk(nodes: Sequence[Node], parent: str) -> None:
        for node in nodes:
            entries.append(Entry(parent, node.name, node.element, node.is_leaf))
            _walk(node.children, f"{parent}/{node.name}" if parent else node.name)

    _walk(forest, "")
    return entries


def list_entries(elements: Iterable[PathElement], *, max_depth: int | None = None) -> list[Entry]:
    return flatten(build_tree(elements, max_depth=max_depth))


def inspect(entries: Iterable[Entry]) -> list[str]:
    """Render entries as "[parent/]name", with "*" for non-stubs and ">" for non-leaves."""
    paths: list[str] = []
    for e in entries:
        s = f"[{e.parent}/]" if e.parent else ""
        s += e.name
        if e.element is not None:
            s += "*"
        if not e.leaf:
            s += ">"
        paths.append(s)
    return paths
