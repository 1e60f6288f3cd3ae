"""Rejects state-changing methods on every path."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

REJECTED_METHODS = ["POST", "PUT", "PATCH", "DELETE"]

router = APIRouter(tags=["Methods"])


@router.api_route("/{full_path:path}", methods=REJECTED_METHODS, include_in_schema=False)
async def method_not_allowed(full_path: str):
    return PlainTextResponse("This method is not allowed\n", status_code=405)
