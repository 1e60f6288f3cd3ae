"""FastAPI application entry point: method filter, assets and rendered pages."""

from typing import Optional

from fastapi import FastAPI

from homepage.config import Settings
from homepage.routers import assets, methods, pages
from homepage.site import load_site


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the ASGI app. The content bundle is loaded here, so a broken
    bundle raises before the server ever accepts a request."""
    site = load_site(settings)

    app = FastAPI(
        title="homepage",
        description="Personal website: static assets and rendered pages.",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.site = site

    # Order matters: the asset and page routes accept any method, so the
    # method filter must match first, and the page router is a catch-all.
    app.include_router(methods.router)
    app.include_router(assets.router)
    app.include_router(pages.router)
    return app


app = create_app()
