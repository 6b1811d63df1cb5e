"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    @pytest.mark.asyncio
    async def test_health_returns_expected_structure(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "Devlink API"
        assert data["version"] == "1.0.0"
        assert "timestamp" in data
        assert "environment" in data
        assert data["database"] is None

    @pytest.mark.asyncio
    async def test_detailed_health_pings_database(self, client: AsyncClient) -> None:
        response = await client.get("/health/detailed")

        assert response.status_code == 200
        assert response.json()["database"] == "healthy"

    @pytest.mark.asyncio
    async def test_responses_carry_request_id(self, client: AsyncClient) -> None:
        response = await client.get("/health", headers={"X-Request-ID": "health-1"})

        assert response.headers["x-request-id"] == "health-1"
        assert response.headers["x-content-type-options"] == "nosniff"

    @pytest.mark.asyncio
    async def test_unknown_route_uses_error_envelope(self, client: AsyncClient) -> None:
        response = await client.get("/api/nope")

        assert response.status_code == 404
        assert response.json()["error_code"] == "HTTP_ERROR"
