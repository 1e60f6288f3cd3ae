"""Rendered HTML pages, including the not-found page."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from homepage.encoding import encoded_response
from homepage.preferences import resolve_dark_mode, set_default_cookie
from homepage.rendering import RenderError
from homepage.site import get_site

logger = logging.getLogger(__name__)

HTML = "text/html"

router = APIRouter(tags=["Pages"])


async def page(request: Request):
    """Render the page registered for the request path, or the 404 page.

    Registered for every method; only GET renders and writes a body.
    """
    site = get_site(request)
    cfg = site.settings
    path = request.url.path
    template = site.renderer.lookup(path)
    if template is None:
        status_code, max_age = 404, cfg.CACHE_MAX_AGE_404
    else:
        status_code, max_age = 200, cfg.CACHE_MAX_AGE

    preference = resolve_dark_mode(request, cfg.DARK_MODE_COOKIE_NAME)
    body = None
    if request.method == "GET":
        data = site.template_data(path, preference)
        try:
            if template is None:
                body = site.renderer.render_not_found(data)
            else:
                body = site.renderer.render(template, data)
        except RenderError:
            logger.exception(f"Failed to render {path}")
            return PlainTextResponse(
                "Internal Server Error\n",
                status_code=500,
                headers={"Cache-Control": "no-store"},
            )

    response = encoded_response(
        request,
        body,
        status_code=status_code,
        content_type=HTML,
        max_age=max_age,
        gzip_level=cfg.GZIP_LEVEL,
    )
    if preference.needs_cookie:
        set_default_cookie(request, response, cfg.DARK_MODE_COOKIE_NAME, cfg.DARK_MODE_COOKIE_DAYS)
    return response


# No method list: every method the filter lets through lands here.
router.add_route("/{full_path:path}", page, include_in_schema=False)
