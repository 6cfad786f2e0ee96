"""
Integration tests for health check endpoints.

These are the simplest tests — they verify the app starts up
and can respond to basic requests. If these fail, everything else
will fail too, so they're a good canary.
"""

from httpx import AsyncClient


async def test_root_endpoint(client: AsyncClient):
    """GET / returns service info."""
    response = await client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["service"] == "Assessment Report API"
    assert data["status"] == "running"
    assert data["version"] == "1.0.0"


async def test_health_check(client: AsyncClient):
    """GET /api/health reports OK with a connected database."""
    response = await client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "OK"
    assert data["database"] == "connected"
    assert "running" in data["message"]


async def test_unknown_route_uses_message_shape(client: AsyncClient):
    response = await client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert "message" in response.json()
