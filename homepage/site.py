"""The immutable site bundle built once at startup."""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from fastapi import Request

from homepage.assets import AssetStore
from homepage.config import Settings, settings as default_settings
from homepage.navigation import ROUTES_MANIFEST, compute_nav_view, load_nav_links
from homepage.preferences import DarkModePreference
from homepage.rendering import PageRenderer
from homepage.schemas import NavLink, TemplateData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Site:
    settings: Settings
    assets: AssetStore
    nav_links: Tuple[NavLink, ...]
    renderer: PageRenderer

    def template_data(self, path: str, preference: DarkModePreference) -> TemplateData:
        """Fresh view-model for one request; never touches the shared nav links."""
        return TemplateData(
            dark_mode=preference.enabled,
            dark_mode_cookie_name=self.settings.DARK_MODE_COOKIE_NAME,
            nav_links=compute_nav_view(self.nav_links, path),
        )


def load_site(settings: Optional[Settings] = None) -> Site:
    """Read and validate the content bundle. Raises BundleError on any defect."""
    settings = settings or default_settings
    assets = AssetStore.from_directory(settings.content_path)
    nav_links = load_nav_links(assets.require(ROUTES_MANIFEST))
    renderer = PageRenderer(
        assets.templates(),
        settings.PAGES,
        settings.NOT_FOUND_TEMPLATE,
    )
    logger.info(
        f"Site ready: {len(assets)} files, {len(settings.PAGES)} pages, "
        f"{len(nav_links)} nav links"
    )
    return Site(settings=settings, assets=assets, nav_links=nav_links, renderer=renderer)


def get_site(request: Request) -> Site:
    """Return the site bundle attached to the app."""
    return request.app.state.site
