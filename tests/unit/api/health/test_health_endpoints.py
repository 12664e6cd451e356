"""Health check endpoints tests."""

from unittest.mock import patch

import pytest
from fastapi import status
from httpx import AsyncClient

from src.modules.health.service import HealthCheckResult


@pytest.mark.asyncio
async def test_liveness(client: AsyncClient):
    response = await client.get("/health/liveness")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "alive", "service": "messages-api"}


@pytest.mark.asyncio
async def test_health_check_database_healthy(client: AsyncClient):
    response = await client.get("/health/")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["status"] == "healthy"
    assert data["services"]["database"]["connected"] is True
    assert "timestamp" in data


@pytest.mark.asyncio
async def test_health_check_database_unhealthy(client: AsyncClient):
    """Test health check when database is unhealthy."""
    with patch(
        "src.modules.health.service.HealthService.check_database_health",
        return_value=HealthCheckResult(
            service="database",
            status="unhealthy",
            connected=False,
            error="Connection refused",
        ),
    ):
        response = await client.get("/health/")

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    data = response.json()
    assert data["status"] == "unhealthy"
    assert data["services"]["database"]["error"] == "Connection refused"
