"""Arrange flat, path-bearing objects into a hierarchical tree."""

from hiertree.core.elements import PathElem, PathElement, as_elements
from hiertree.core.errors import DuplicatePathError, HierTreeError, InvalidPathError, PathTooDeepError
from hiertree.core.flatten import Entry, flatten, inspect, list_entries
from hiertree.core.paths import compare_paths, join_path, split_path
from hiertree.core.tree import Node, build_tree

__version__ = "0.1.0"

__all__ = [
    "DuplicatePathError",
    "Entry",
    "HierTreeError",
    "InvalidPathError",
    "Node",
    "PathElem",
    "PathElement",
    "PathTooDeepError",
    "as_elements",
    "build_tree",
    "compare_paths",
    "flatten",
    "inspect",
    "join_path",
    "list_entries",
    "split_path",
]
