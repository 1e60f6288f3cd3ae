"""Favicon and static asset serving."""

import gzip

import pytest

from homepage.assets import AssetStore, DEFAULT_MIME_TYPE, guess_content_type
from conftest import BUNDLED_CONTENT, make_client


@pytest.mark.asyncio
async def test_static_css(client):
    r = await client.get("/static/style.css")
    assert r.status_code == 200
    assert r.headers["content-type"] == "text/css"
    assert r.headers["cache-control"] == "public, max-age=604800"
    assert r.content == (BUNDLED_CONTENT / "static" / "style.css").read_bytes()


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/static/missing.css", "/static/", "/static/templates/index.html"])
async def test_static_miss(client, path):
    r = await client.get(path)
    assert r.status_code == 404
    assert r.headers["cache-control"] == "public, max-age=86400"
    assert r.content == b""


@pytest.mark.asyncio
async def test_static_gzip(client):
    async with client.stream("GET", "/static/theme.js", headers={"Accept-Encoding": "gzip"}) as r:
        raw = b"".join([chunk async for chunk in r.aiter_raw()])
        assert r.headers["content-encoding"] == "gzip"
        assert r.headers["content-type"] == "text/javascript"
    assert gzip.decompress(raw) == (BUNDLED_CONTENT / "static" / "theme.js").read_bytes()


@pytest.mark.asyncio
async def test_static_head_has_no_body(client):
    r = await client.head("/static/style.css")
    assert r.status_code == 200
    assert r.headers["content-type"] == "text/css"
    assert r.content == b""


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["TRACE", "OPTIONS", "PROPFIND"])
@pytest.mark.parametrize("path, status", [
    ("/static/style.css", 200),
    ("/favicon.ico", 200),
    ("/static/missing.css", 404),
])
async def test_other_methods_fall_through_to_asset_routes(client, method, path, status):
    r = await client.request(method, path)
    assert r.status_code == status
    assert "cache-control" in r.headers
    assert "content-length" not in r.headers
    assert r.content == b""


@pytest.mark.asyncio
async def test_static_miss_with_gzip_is_not_compressed(client):
    r = await client.get("/static/missing.css", headers={"Accept-Encoding": "gzip"})
    assert r.status_code == 404
    assert "content-encoding" not in r.headers
    assert r.headers["content-length"] == "0"


@pytest.mark.asyncio
async def test_static_does_not_set_preference_cookie(client):
    r = await client.get("/static/style.css")
    assert "set-cookie" not in r.headers


@pytest.mark.asyncio
async def test_favicon(client):
    r = await client.get("/favicon.ico")
    assert r.status_code == 200
    assert r.headers["content-type"] == "image/x-icon"
    assert r.headers["cache-control"] == "public, max-age=604800"
    assert r.content == (BUNDLED_CONTENT / "static" / "favicon.ico").read_bytes()


@pytest.mark.asyncio
async def test_favicon_missing(content_dir, build_app):
    (content_dir / "static" / "favicon.ico").unlink()
    async with make_client(build_app()) as c:
        r = await c.get("/favicon.ico")
    assert r.status_code == 404
    assert r.headers["cache-control"] == "public, max-age=86400"
    assert r.content == b""


@pytest.mark.asyncio
async def test_unknown_extension_is_binary(content_dir, build_app):
    (content_dir / "static" / "blob.xyz").write_bytes(b"\x00\x01\x02")
    (content_dir / "static" / "fonts").mkdir()
    (content_dir / "static" / "fonts" / "Body.WOFF2").write_bytes(b"wOF2")
    async with make_client(build_app()) as c:
        r = await c.get("/static/blob.xyz")
        assert r.status_code == 200
        assert r.headers["content-type"] == "application/octet-stream"
        assert r.content == b"\x00\x01\x02"

        r = await c.get("/static/fonts/Body.WOFF2")
        assert r.headers["content-type"] == "font/woff2"


@pytest.mark.parametrize("name, expected", [
    ("style.css", "text/css"),
    ("app.js", "text/javascript"),
    ("resume.pdf", "application/pdf"),
    ("module.wasm", "application/wasm"),
    ("favicon.ico", "image/x-icon"),
    ("archive.tar.gz", DEFAULT_MIME_TYPE),
    ("Makefile", DEFAULT_MIME_TYPE),
])
def test_guess_content_type(name, expected):
    assert guess_content_type(name) == expected


def test_asset_store_lookups_never_leave_static():
    store = AssetStore({"routes.json": b"[]", "static/a.css": b"a"})
    assert store.static("a.css") == b"a"
    assert store.static("../routes.json") is None
    assert store.static("") is None
    assert store.get("routes.json") == b"[]"
    assert store.get("static/a.css") == b"a"
    assert len(store) == 2


def test_asset_store_is_read_only():
    store = AssetStore({"static/a.css": b"a"})
    with pytest.raises(TypeError):
        store._files["static/b.css"] = b"b"


def test_asset_store_templates():
    store = AssetStore({
        "templates/index.html": b"hi",
        "templates/layouts/main.html": b"<main>",
        "static/a.css": b"a",
    })
    assert store.templates() == {"index.html": "hi", "layouts/main.html": "<main>"}
