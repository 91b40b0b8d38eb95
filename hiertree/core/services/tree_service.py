from __future__ import annotations

import logging

from hiertree.config import Settings
from hiertree.content_tree import count_nodes, forest_to_dict, render_tree_text, root_counts
from hiertree.core.elements import PathElem
from hiertree.core.errors import APIError, DuplicatePathError, HierTreeError
from hiertree.core.flatten import flatten, inspect
from hiertree.core.paths import split_path
from hiertree.core.tree import Node, build_tree
from hiertree.models import (
    EntriesResponse,
    EntryOut,
    TreeItem,
    TreeNodeOut,
    TreeRequest,
    TreeResponse,
    TreeStats,
)

logger = logging.getLogger(__name__)


def _to_elem(path: str | list[str], data: dict | None, delimiter: str) -> PathElem:
    if isinstance(path, str):
        return PathElem(split_path(path, delimiter), data)
    return PathElem(tuple(path), data)


def request_elements(req: TreeRequest, delimiter: str = "/") -> list[PathElem]:
    items = list(req.items) + [TreeItem(path=p) for p in req.paths]
    return [_to_elem(item.path, item.data, delimiter) for item in items]


def map_tree_error(err: HierTreeError) -> APIError:
    details = {"path": list(err.path)}
    if isinstance(err, DuplicatePathError):
        return APIError(409, "duplicate_path", str(err), details)
    return APIError(400, "invalid_path", str(err), details)


def build_forest(req: TreeRequest, settings: Settings | None = None) -> list[Node]:
    settings = settings or Settings.from_env()
    elements = request_elements(req, settings.delimiter)
    try:
        forest = build_tree(elements, max_depth=settings.max_depth)
    except HierTreeError as e:
        logger.warning("tree build rejected %d elements: %s", len(elements), e)
        raise map_tree_error(e)
    logger.info("tree built: %d elements, %d roots", len(elements), len(forest))
    return forest


def tree_response(req: TreeRequest, settings: Settings | None = None) -> TreeResponse:
    forest = build_forest(req, settings)
    counts = root_counts(forest)
    return TreeResponse(
        roots=[TreeNodeOut.model_validate(node) for node in forest_to_dict(forest)],
        stats=TreeStats(
            element_count=sum(counts.values()),
            node_count=count_nodes(forest),
            root_counts=counts,
        ),
    )


def build_entries(req: TreeRequest, settings: Settings | None = None) -> EntriesResponse:
    entries = flatten(build_forest(req, settings))
    out = [
        EntryOut(
            parent=e.parent,
            name=e.name,
            path=e.path,
            has_element=e.element is not None,
            leaf=e.leaf,
            data=getattr(e.element, "data", None),
        )
        for e in entries
    ]
    return EntriesResponse(count=len(out), entries=out, inspect=inspect(entries))


def render_text(req: TreeRequest, settings: Settings | None = None) -> str:
    return render_tree_text(build_forest(req, settings))
