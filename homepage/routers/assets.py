"""Favicon and ``/static/`` asset endpoints.

Both routes are registered without a method list so that any method the
method filter lets through (HEAD, OPTIONS, TRACE, ...) is answered with the
same status and headers as GET, minus the body.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Request

from homepage.assets import guess_content_type
from homepage.encoding import encoded_response
from homepage.site import Site, get_site

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Assets"])


def _serve(request: Request, site: Site, data: Optional[bytes], content_type: str):
    cfg = site.settings
    write_body = request.method == "GET"
    if data is None:
        logger.debug(f"Asset miss: {request.url.path}")
        return encoded_response(
            request,
            b"" if write_body else None,
            status_code=404,
            max_age=cfg.CACHE_MAX_AGE_404,
        )
    return encoded_response(
        request,
        data if write_body else None,
        content_type=content_type,
        max_age=cfg.CACHE_MAX_AGE,
        gzip_level=cfg.GZIP_LEVEL,
    )


async def favicon(request: Request):
    site = get_site(request)
    return _serve(request, site, site.assets.static("favicon.ico"), "image/x-icon")


async def static_asset(request: Request):
    site = get_site(request)
    asset_path = request.path_params["asset_path"]
    return _serve(request, site, site.assets.static(asset_path), guess_content_type(asset_path))


router.add_route("/favicon.ico", favicon, include_in_schema=False)
router.add_route("/static/{asset_path:path}", static_asset, include_in_schema=False)
