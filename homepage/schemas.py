"""Pydantic view-model schemas shared by the navigation and page templates."""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


# ── Navigation ───────────────────────────────────────────────────────────────

class NavLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    active: bool = False


# ── Template context ─────────────────────────────────────────────────────────

class TemplateData(BaseModel):
    """Per-request data handed to every page template as ``data``."""

    dark_mode: bool = False
    dark_mode_cookie_name: str
    nav_links: List[NavLink] = Field(default_factory=list)
