from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from hiertree.core.tree import Node


def forest_to_dict(forest: Sequence[Node]) -> list[dict[str, Any]]:
    out: list[dict[str, Any]] = []
    for node in forest:
        data = getattr(node.element, "data", None)
        out.append(
            {
                "name": node.name,
                "has_element": node.element is not None,
                "data": data,
                "children": forest_to_dict(node.children),
            }
        )
    return out


def count_elements(node: Node) -> int:
    own = 0 if node.element is None else 1
    return own + sum(count_elements(child) for child in node.children)


def count_nodes(forest: Sequence[Node]) -> int:
    return sum(1 + count_nodes(node.children) for node in forest)


def root_counts(forest: Sequence[Node]) -> dict[str, int]:
    return {node.name: count_elements(node) for node in forest}


def render_tree_text(forest: Sequence[Node]) -> str:
    lines = ["."]

    def _walk(nodes: Sequence[Node], prefix: str) -> None:
        for idx, node in enumerate(nodes):
            is_last = idx == len(nodes) - 1
            branch = "`-- " if is_last else "|-- "
            marker = "" if node.element is None else "*"
            lines.append(f"{prefix}{branch}{node.name}{marker}")
            child_prefix = f"{prefix}{'    ' if is_last else '|   '}"
            _walk(node.children, child_prefix)

    _walk(forest, "")
    return "\n".join(lines)
