from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from hiertree.core.auth import require_api_key
from hiertree.core.services.tree_service import build_entries, render_text, tree_response
from hiertree.models import EntriesResponse, ErrorResponse, TreeRequest, TreeResponse

router = APIRouter(
    prefix="/tree",
    tags=["tree"],
    dependencies=[Depends(require_api_key)],
)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}


@router.post("", response_model=TreeResponse, responses=ERROR_RESPONSES)
def build_tree_endpoint(req: TreeRequest) -> TreeResponse:
    return tree_response(req)


@router.post("/entries", response_model=EntriesResponse, responses=ERROR_RESPONSES)
def list_entries_endpoint(req: TreeRequest) -> EntriesResponse:
    return build_entries(req)


@router.post("/text", response_class=PlainTextResponse, responses=ERROR_RESPONSES)
def render_text_endpoint(req: TreeRequest) -> PlainTextResponse:
    return PlainTextResponse(render_text(req))
