from __future__ import annotations

import secrets
from typing import Annotated

from fastapi import Security
from fastapi.security import APIKeyHeader

from hiertree.config import Settings
from hiertree.core.errors import APIError


api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def api_key_matches(provided: str | None, expected: str) -> bool:
    if not expected:
        return True
    if provided is None:
        return False
    return secrets.compare_digest(provided.encode(), expected.encode())


async def require_api_key(
    x_api_key: Annotated[str | None, Security(api_key_header)],
) -> None:
    if not api_key_matches(x_api_key, Settings.from_env().api_key):
        raise APIError(status_code=401, code="unauthorized", message="Invalid API key")
