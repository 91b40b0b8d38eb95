from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class TreeItem(BaseModel):
    path: str | list[str] = Field(
        ...,
        description="Slash-delimited path like 'docs/api/intro' or its components ['docs', 'api', 'intro']",
    )
    data: dict[str, Any] | None = None


class TreeRequest(BaseModel):
    items: list[TreeItem] = Field(default_factory=list)
    paths: list[str | list[str]] = Field(default_factory=list, description="Shorthand for items without data")


class TreeNodeOut(BaseModel):
    name: str
    has_element: bool
    data: dict[str, Any] | None = None
    children: list[TreeNodeOut] = Field(default_factory=list)


class TreeStats(BaseModel):
    element_count: int
    node_count: int
    root_counts: dict[str, int] = Field(default_factory=dict)


class TreeResponse(BaseModel):
    roots: list[TreeNodeOut]
    stats: TreeStats


class EntryOut(BaseModel):
    parent: str
    name: str
    path: str
    has_element: bool
    leaf: bool
    data: dict[str, Any] | None = None


class EntriesResponse(BaseModel):
    count: int
    entries: list[EntryOut]
    inspect: list[str]


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict[str, Any] | None = None


class HealthResponse(BaseModel):
    ok: bool


class ReadyResponse(BaseModel):
    ready: bool
    max_depth: int | None = None


TreeNodeOut.model_rebuild()
