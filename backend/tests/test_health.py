"""Health check and general endpoint tests."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test health check endpoint."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["app"] == "Patrimoine"
    assert data["database"] == "ok"


@pytest.mark.asyncio
async def test_nonexistent_endpoint(client: AsyncClient):
    """Test 404 for nonexistent endpoint."""
    response = await client.get("/api/nonexistent")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_unhandled_error_returns_generic_body(client: AsyncClient, monkeypatch):
    """Unexpected failures are logged and reported without internals."""
    from app.services.portfolio_service import portfolio_service

    async def broken(*args, **kwargs):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(portfolio_service, "get_summary", broken)

    response = await client.get("/api/portfolio")
    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "INTERNAL_ERROR"
    assert "disk on fire" not in response.text
