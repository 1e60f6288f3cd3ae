"""Response encoding: gzip negotiation and caching headers."""

import gzip
from typing import Optional, Union

from starlette.requests import Request
from starlette.responses import Response


def accepts_gzip(request: Request) -> bool:
    """True if the literal ``gzip`` token is among the advertised encodings.

    No quality values are honoured: ``gzip;q=0`` still counts as present.
    """
    for value in request.headers.getlist("accept-encoding"):
        for token in value.split(","):
            if token.split(";", 1)[0].strip().lower() == "gzip":
                return True
    return False


def cache_control(max_age: int) -> str:
    return f"public, max-age={max_age}"


def encoded_response(
    request: Request,
    body: Optional[Union[bytes, str]],
    *,
    status_code: int = 200,
    content_type: Optional[str] = None,
    max_age: int,
    gzip_level: int = 6,
) -> Response:
    """Build the response, gzip-compressing ``body`` when the client allows it.

    ``body=None`` means headers only (any method other than GET): no body and
    no Content-Length.
    Empty bodies are never compressed.
    """
    headers = {"Cache-Control": cache_control(max_age), "Vary": "Accept-Encoding"}
    if content_type is not None:
        headers["Content-Type"] = content_type

    if isinstance(body, str):
        body = body.encode("utf-8")
    if body and accepts_gzip(request):
        headers["Content-Encoding"] = "gzip"
        body = gzip.compress(body, compresslevel=gzip_level, mtime=0)

    response = Response(content=body or b"", status_code=status_code, headers=headers)
    if body is None:
        del response.headers["content-length"]
    return response
