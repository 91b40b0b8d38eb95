from hiertree.core.services.tree_service import build_entries, build_forest, render_text, tree_response

__all__ = [
    "build_entries",
    "build_forest",
    "render_text",
    "tree_response",
]
