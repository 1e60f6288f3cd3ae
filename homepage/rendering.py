"""Page registry and template rendering (Jinja2)."""

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from jinja2 import (
    DictLoader,
    Environment,
    StrictUndefined,
    Template,
    TemplateError,
    select_autoescape,
)

from homepage.assets import BundleError
from homepage.schemas import TemplateData

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """A template failed while rendering a single request."""


class PageRenderer:
    """Compiles every page template once and renders them per request.

    Args:
        templates: Template sources keyed by name (e.g. ``layouts/main.html``).
        pages: URL path -> template name.
        not_found_template: Template name rendered for unregistered paths.
    """

    def __init__(
        self,
        templates: Mapping[str, str],
        pages: Mapping[str, str],
        not_found_template: str,
    ):
        self.env = Environment(
            loader=DictLoader(dict(templates)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Parse every bundled template, layouts and partials included.
        for name in templates:
            self._compile(name)

        compiled: Dict[str, Template] = {}
        for path, name in pages.items():
            compiled[path] = self._compile(name)
        self._pages = MappingProxyType(compiled)
        self._not_found = self._compile(not_found_template)

    def _compile(self, name: str) -> Template:
        try:
            return self.env.get_template(name)
        except TemplateError as e:
            raise BundleError(f"Failed to load template {name!r}: {e}") from e

    @property
    def paths(self):
        return self._pages.keys()

    def lookup(self, path: str) -> Optional[Template]:
        return self._pages.get(path)

    def render(self, template: Template, data: TemplateData) -> str:
        try:
            return template.render(data=data)
        except Exception as e:
            raise RenderError(f"Rendering {template.name!r} failed: {e}") from e

    def render_not_found(self, data: TemplateData) -> str:
        return self.render(self._not_found, data)
