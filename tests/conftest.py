"""Shared fixtures: clients against the bundled site and throwaway bundles."""

import shutil
from pathlib import Path

import pytest
from httpx import AsyncClient, ASGITransport

from homepage.config import Settings
from homepage.main import app, create_app

BUNDLED_CONTENT = Path(__file__).resolve().parent.parent / "homepage" / "content"
COOKIE_NAME = Settings().DARK_MODE_COOKIE_NAME


def make_client(asgi_app, **kwargs) -> AsyncClient:
    """httpx sends ``Accept-Encoding: gzip`` by default; ask for identity unless overridden."""
    headers = {"Accept-Encoding": "identity", **kwargs.pop("headers", {})}
    transport = ASGITransport(app=asgi_app)
    return AsyncClient(transport=transport, base_url="http://test", headers=headers, **kwargs)


@pytest.fixture
async def client():
    async with make_client(app) as c:
        yield c


@pytest.fixture
def content_dir(tmp_path) -> Path:
    """A writable copy of the bundled content for tests that break it."""
    target = tmp_path / "content"
    shutil.copytree(BUNDLED_CONTENT, target)
    return target


@pytest.fixture
def build_app(content_dir):
    def _build(**overrides):
        return create_app(Settings(CONTENT_DIR=str(content_dir), **overrides))
    return _build
