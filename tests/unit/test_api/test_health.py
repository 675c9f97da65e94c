"""
Health route tests with the database session and Redis client mocked.
"""
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from app.api.routes import health
from app.core.database import get_db
from app.main import app

API = "/api/v1"


@pytest.fixture
def healthy_db():
    session = AsyncMock()
    app.dependency_overrides[get_db] = lambda: session
    return session


@pytest.mark.unit
class TestHealth:

    @pytest.mark.asyncio
    async def test_all_healthy(self, client, healthy_db, monkeypatch):
        redis_client = AsyncMock()
        monkeypatch.setattr(health.redis, "from_url", lambda url: redis_client)

        resp = await client.get(f"{API}/health")

        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"
        redis_client.aclose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failed_ping_still_closes_client(self, client, healthy_db, monkeypatch):
        redis_client = AsyncMock()
        redis_client.ping.side_effect = RedisConnectionError("connection refused")
        monkeypatch.setattr(health.redis, "from_url", lambda url: redis_client)

        resp = await client.get(f"{API}/health")

        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "degraded"
        assert body["checks"]["database"] == "healthy"
        assert body["checks"]["redis"].startswith("unhealthy")
        redis_client.aclose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_malformed_redis_url_is_degraded(self, client, healthy_db, monkeypatch):
        monkeypatch.setattr(health.settings, "redis_url", "localhost:6379")

        resp = await client.get(f"{API}/health")

        assert resp.status_code == 200
        assert resp.json()["status"] == "degraded"
        assert resp.json()["checks"]["redis"].startswith("unhealthy")
