"""Application configuration via pydantic-settings."""

import os
from pathlib import Path
from typing import Dict
from pydantic_settings import BaseSettings, SettingsConfigDict

# Package directory (where this file lives: homepage/config.py)
_PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Bundled content – static assets, templates and the route manifest
    CONTENT_DIR: str = str(_PACKAGE_DIR / "content")

    # Page registry: URL path -> template name (relative to content/templates)
    PAGES: Dict[str, str] = {
        "/": "index.html",
        "/about": "about.html",
        "/particles": "particles.html",
        "/resume": "resume.html",
    }
    NOT_FOUND_TEMPLATE: str = "errors/404.html"

    # Caching – one week for hits, one day for misses
    CACHE_MAX_AGE: int = 60 * 60 * 24 * 7
    CACHE_MAX_AGE_404: int = 60 * 60 * 24

    # Dark-mode preference cookie
    DARK_MODE_COOKIE_NAME: str = "aj-dot-dev##dark-mode"
    DARK_MODE_COOKIE_DAYS: int = 365

    GZIP_LEVEL: int = 6

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "info"

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)


def _build_settings() -> Settings:
    """Build settings, fixing a relative content path to be absolute."""
    s = Settings(
        _env_file=str(Path.cwd() / ".env"),
        _env_file_encoding="utf-8",
    )
    if not os.path.isabs(s.CONTENT_DIR):
        s.CONTENT_DIR = str(_PACKAGE_DIR / s.CONTENT_DIR)
    return s


settings = _build_settings()
