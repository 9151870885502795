"""Static asset and single-page app fallback tests."""

import pytest


@pytest.mark.asyncio
async def test_index_served_at_root(client):
    r = await client.get("/")
    assert r.status_code == 200
    assert "app.js" in r.text


@pytest.mark.asyncio
async def test_stylesheet(client):
    r = await client.get("/css/style.css")
    assert r.status_code == 200
    assert "css" in r.headers["content-type"]


@pytest.mark.asyncio
async def test_script(client):
    r = await client.get("/js/app.js")
    assert r.status_code == 200
    assert "javascript" in r.headers["content-type"]


@pytest.mark.asyncio
async def test_favicon(client):
    r = await client.get("/favicon.svg")
    assert r.status_code == 200
    assert "<svg" in r.text


@pytest.mark.asyncio
async def test_client_routes_fall_back_to_index(client):
    r = await client.get("/history/2026-01-01")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "Audit Dashboard" in r.text


@pytest.mark.asyncio
async def test_missing_shell_is_404(data_dir, tmp_path):
    from httpx import ASGITransport, AsyncClient

    from auditdash.main import create_app

    app = create_app(data_dir=data_dir, static_dir=tmp_path / "no-static")
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        r = await ac.get("/")
    assert r.status_code == 404
    assert r.json() == {"error": "Not found"}
