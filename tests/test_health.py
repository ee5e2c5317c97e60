"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"
    assert data.get("version")


async def test_no_write_routes(client: AsyncClient) -> None:
    """The audit API is read-only."""
    assert (await client.post("/api/v1/audit", json={})).status_code == 405
    assert (await client.delete("/api/v1/audit/abc")).status_code == 405
    assert (await client.put("/api/v1/audit/abc", json={})).status_code == 405
