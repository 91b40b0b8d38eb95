import json
import logging
import time
import uuid

from starlette.requests import Request
from starlette.responses import Response

from hiertree.config import Settings

REQUEST_ID_HEADER = "X-Request-Id"

access_logger = logging.getLogger("hiertree.access")


def setup_logging(level: str | None = None):
    logging.basicConfig(level=level or Settings.from_env().log_level)


def access_record(request: Request, response: Response, req_id: str, elapsed_ms: float) -> dict:
    record = {
        "msg": "request",
        "req_id": req_id,
        "method": request.method,
        "path": request.url.path,
        "status": response.status_code,
        "elapsed_ms": round(elapsed_ms, 2),
    }
    if response.status_code >= 400:
        record["level"] = "error" if response.status_code >= 500 else "warning"
    return record


async def inject_request_id(request: Request, call_next):
    req_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    request.state.req_id = req_id
    started = time.perf_counter()
    response: Response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = req_id
    elapsed_ms = (time.perf_counter() - started) * 1000
    access_logger.info(json.dumps(access_record(request, response, req_id, elapsed_ms)))
    return response
