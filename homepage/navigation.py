"""Navigation registry: the site's ordered nav links and the per-request view."""

import json
import logging
from typing import List, Sequence, Tuple, Union

from pydantic import TypeAdapter, ValidationError

from homepage.assets import BundleError
from homepage.schemas import NavLink

logger = logging.getLogger(__name__)

ROUTES_MANIFEST = "routes.json"

_nav_links_adapter = TypeAdapter(List[NavLink])


def load_nav_links(raw: Union[bytes, str]) -> Tuple[NavLink, ...]:
    """Parse the route manifest (a JSON list of ``{name, path}`` objects).

    Any ``active`` flag in the manifest is discarded; the registry is always
    stored inactive and never mutated afterwards.
    """
    try:
        entries = json.loads(raw)
    except json.JSONDecodeError as e:
        raise BundleError(f"Route manifest is not valid JSON: {e}") from e
    if not isinstance(entries, list):
        raise BundleError("Route manifest must be a JSON list")
    try:
        links = _nav_links_adapter.validate_python(entries)
    except ValidationError as e:
        raise BundleError(f"Route manifest has invalid entries: {e}") from e
    return tuple(link.model_copy(update={"active": False}) for link in links)


def compute_nav_view(links: Sequence[NavLink], current_path: str) -> List[NavLink]:
    """Return fresh copies of ``links`` with only the one matching ``current_path`` active."""
    return [
        NavLink(name=link.name, path=link.path, active=link.path == current_path)
        for link in links
    ]
