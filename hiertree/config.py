from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 128
# nested response models stop serializing a little above 250 levels
MAX_DEPTH_CEILING = 200


def _parse_max_depth(raw: str | None) -> int:
    try:
        value = int(raw) if raw else DEFAULT_MAX_DEPTH
    except ValueError:
        return DEFAULT_MAX_DEPTH
    if value <= 0:
        return DEFAULT_MAX_DEPTH
    return min(value, MAX_DEPTH_CEILING)


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    max_depth: int = DEFAULT_MAX_DEPTH
    delimiter: str = "/"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            api_key=os.getenv("HIERTREE_API_KEY", ""),
            max_depth=_parse_max_depth(os.getenv("HIERTREE_MAX_DEPTH")),
            delimiter=os.getenv("HIERTREE_DELIMITER") or "/",
            log_level=(os.getenv("HIERTREE_LOG_LEVEL") or "INFO").upper(),
        )
