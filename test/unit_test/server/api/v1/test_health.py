from unittest.mock import MagicMock

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from stay_with_friends.server.core.constant import VERSION
from stay_with_friends.server.main import app
from stay_with_friends.server.services.deps import get_engine

# Mark all tests in this module as async
pytestmark = pytest.mark.asyncio


async def test_health_check(client: AsyncClient):
    response = await client.get("http://localhost/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "ok"}


async def test_health_check_reports_unreachable_database(client: AsyncClient):
    broken = MagicMock()
    broken.connect.side_effect = OperationalError("SELECT 1", {}, Exception("unable to open database file"))
    app.dependency_overrides[get_engine] = lambda: broken

    response = await client.get("/health")

    assert response.status_code == 503
    assert response.json() == {"status": "degraded", "database": "unavailable"}


async def test_version(client: AsyncClient):
    response = await client.get("http://localhost/version")
    assert response.status_code == 200
    assert response.json() == {"version": VERSION}


async def test_openapi_served_under_api_prefix(client: AsyncClient):
    response = await client.get("/api/openapi.json")
    assert response.status_code == 200
    assert "/api/hosts/search" in response.json()["paths"]
