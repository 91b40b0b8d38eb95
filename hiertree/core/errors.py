from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class APIError(Exception):
    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details


class HierTreeError(ValueError):
    """Base class for tree construction failures. Carries the offending path."""

    reason = "tree error"

    def __init__(self, path: Sequence[str] | None):
        self.path = tuple(path or ())
        super().__init__(f"{self.reason}: {self.display_path!r}")

    @property
    def display_path(self) -> str:
        return "/".join(str(c) for c in self.path)


class InvalidPathError(HierTreeError):
    reason = "invalid node path"


class PathTooDeepError(InvalidPathError):
    reason = "invalid node path (too deep)"


class DuplicatePathError(HierTreeError):
    reason = "duplicate node path"
