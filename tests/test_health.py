"""Health and version endpoint tests."""

import pytest

from auditdash import __version__


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == __version__
    assert data["lastAuditDate"] == "2026-01-01"
    assert data["healthScore"] == 80
    assert data["agentCount"] == 4
    assert data["lastRunDuration"] == 754


@pytest.mark.asyncio
async def test_health_check_without_data(tmp_path):
    from httpx import ASGITransport, AsyncClient

    from auditdash.main import create_app

    app = create_app(data_dir=tmp_path / "missing")
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get("/health")
    assert response.status_code == 200
    assert response.json()["healthScore"] is None


@pytest.mark.asyncio
async def test_version(client):
    response = await client.get("/api/version")
    assert response.status_code == 200
    assert response.json()["version"] == __version__
    assert "buildDate" in response.json()


@pytest.mark.asyncio
async def test_trace_id_propagated(client):
    response = await client.get("/api/version", headers={"X-Trace-Id": "trc_test_0001"})
    assert response.headers["X-Trace-Id"] == "trc_test_0001"

    generated = await client.get("/api/version")
    assert generated.headers["X-Trace-Id"].startswith("trc_")
