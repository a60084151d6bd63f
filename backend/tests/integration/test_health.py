"""Tests for the health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from mozuk.main import app


@pytest.mark.asyncio
async def test_health_check_returns_200():
    """Health endpoint should answer without a token or a database."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data
    assert "environment" in data


@pytest.mark.asyncio
async def test_protected_route_without_token_returns_401():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/clients")

    assert response.status_code == 401
