from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from hiertree.core.paths import DEFAULT_DELIMITER, join_path, split_path


@runtime_checkable
class PathElement(Protocol):
    def path_components(self) -> Sequence[str]:
        """Components of the element's path, e.g. ("a", "b", "c") for "a/b/c"."""
        ...


@dataclass(frozen=True)
class PathElem:
    """Plain element carrying a component path and an optional payload."""

    components: tuple[str, ...]
    data: dict[str, Any] | None = field(default=None, compare=False)

    @classmethod
    def from_path(
        cls,
        raw: str,
        data: dict[str, Any] | None = None,
        delimiter: str = DEFAULT_DELIMITER,
    ) -> "PathElem":
        return cls(split_path(raw, delimiter), data)

    def path_components(self) -> tuple[str, ...]:
        return self.components

    def __str__(self) -> str:
        return join_path(self.components)


def as_elements(
    values: Iterable[PathElement | str | Sequence[str]],
    delimiter: str = DEFAULT_DELIMITER,
) -> Iterator[PathElement]:
    for value in values:
        if isinstance(value, str):
            yield PathElem.from_path(value, delimiter=delimiter)
        elif isinstance(value, PathElement):
            yield value
        else:
            yield PathElem(tuple(value))
