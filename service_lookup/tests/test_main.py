"""
Unit tests for the Lookup service HTTP surface.
"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from service_lookup.app.cache import MemoryInfoCache, RedisInfoCache
from service_lookup.app.main import LookupService, create_app
from service_lookup.app.models import LookupOutcome, LookupResult
from shared.errors import ExternalServiceError, ValidationError
from shared.test_helpers import FakeInfoStore


class TestLookupService:
    """Test cases for LookupService."""

    @pytest.fixture
    def service(self):
        """Create LookupService with in-memory stores."""
        service = LookupService()
        service.cache = MemoryInfoCache()
        service.store = FakeInfoStore({"abc-123": "payload-abc"})
        service.lookup_service.cache = service.cache
        service.lookup_service.store = service.store
        return service

    @pytest.fixture
    def client(self, service):
        """Create test client."""
        return TestClient(service.app)

    def test_root_endpoint(self, client):
        """Test root endpoint."""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["service"] == "lookup"
        assert "cache_aside" in data["capabilities"]

    def test_create_app_exposes_service(self):
        app = create_app()
        assert isinstance(app.state.lookup_service, LookupService)

    def test_get_info_miss_then_hit(self, client, service):
        """First request populates the cache, the second is served from it."""
        first = client.get("/get-info/abc-123")
        assert first.status_code == 200
        assert first.json() == {"data": "payload-abc"}
        assert first.headers["X-Cache"] == "MISS"

        second = client.get("/get-info/abc-123")
        assert second.status_code == 200
        assert second.json() == {"data": "payload-abc"}
        assert second.headers["X-Cache"] == "HIT"

        assert service.store.get_calls == ["abc-123"]

    def test_get_info_not_found(self, client):
        response = client.get("/get-info/missing")

        assert response.status_code == 404
        body = response.json()
        assert body["code"] == "NOT_FOUND"
        assert body["message"] == "Data not found"
        assert body["details"]["info_id"] == "missing"

    def test_get_info_store_unavailable(self, client, service):
        service.store.fail("connection refused")

        response = client.get("/get-info/abc-123")

        assert response.status_code == 500
        assert response.json()["code"] == "DURABLE_UNAVAILABLE"

    def test_get_info_cache_unavailable(self, client, service):
        service.cache.get = AsyncMock(side_effect=ExternalServiceError("redis", "Connection refused"))

        response = client.get("/get-info/abc-123")

        assert response.status_code == 500
        assert response.json()["code"] == "CACHE_UNAVAILABLE"
        assert service.store.get_calls == []

    def test_get_info_cache_write_failed(self, client, service):
        service.cache.set = AsyncMock(side_effect=ExternalServiceError("redis", "READONLY"))

        response = client.get("/get-info/abc-123")

        assert response.status_code == 500
        assert response.json()["code"] == "CACHE_WRITE_FAILED"

    def test_unclassified_error_maps_to_internal(self, service):
        service.lookup_service.lookup = AsyncMock(side_effect=RuntimeError("boom"))
        client = TestClient(service.app, raise_server_exceptions=False)

        response = client.get("/get-info/abc-123")

        assert response.status_code == 500
        assert response.json()["code"] == "INTERNAL_ERROR"

    def test_request_timeout_from_config(self, monkeypatch):
        monkeypatch.setenv("LOOKUP_REQUEST_TIMEOUT_SECONDS", "2.5")
        service = LookupService()
        service.lookup_service.lookup = AsyncMock(
            return_value=LookupResult(data="payload", outcome=LookupOutcome.CACHE_HIT)
        )

        response = TestClient(service.app).get("/get-info/abc-123")

        assert response.status_code == 200
        service.lookup_service.lookup.assert_awaited_once_with("abc-123", timeout=2.5)

    def test_request_id_echoed(self, client):
        response = client.get("/get-info/abc-123", headers={"X-Request-ID": "req-42"})
        assert response.headers["X-Request-ID"] == "req-42"

    def test_health_ok(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["service"] == "lookup"
        assert data["status"] == "ok"
        assert data["dependencies"] == {"cache": "ok", "postgres": "ok"}

    def test_health_degraded(self, client, service):
        service.store.fail()

        response = client.get("/health")

        assert response.status_code == 503
        assert response.json()["dependencies"]["postgres"] == "error"

    def test_metrics_endpoint(self, client):
        client.get("/get-info/abc-123")
        client.get("/get-info/abc-123")

        response = client.get("/metrics")

        assert response.status_code == 200
        assert 'lookups_total{outcome="cache_hit"} 1.0' in response.text
        assert "http_requests_total" in response.text

    def test_default_cache_backend_is_redis(self):
        service = LookupService()
        assert isinstance(service.cache, RedisInfoCache)

    def test_memory_cache_backend(self, monkeypatch):
        monkeypatch.setenv("LOOKUP_CACHE_BACKEND", "memory")
        service = LookupService()
        assert isinstance(service.cache, MemoryInfoCache)
        assert service.lookup_service.cache_type == "memory"

    def test_unsupported_cache_backend(self, monkeypatch):
        monkeypatch.setenv("LOOKUP_CACHE_BACKEND", "memcached")
        with pytest.raises(ValidationError):
            LookupService()

    @pytest.mark.asyncio
    async def test_start_seeds_when_configured(self, monkeypatch):
        monkeypatch.setenv("LOOKUP_CACHE_BACKEND", "memory")
        monkeypatch.setenv("LOOKUP_SEED_ON_STARTUP", "true")
        monkeypatch.setenv("LOOKUP_SEED_COUNT", "5")
        service = LookupService()
        service.store.start = AsyncMock()
        service.store.ensure_schema = AsyncMock()
        service.store.seed = AsyncMock(return_value=["a", "b", "c", "d", "e"])

        await service.start()

        service.store.ensure_schema.assert_awaited_once()
        service.store.seed.assert_awaited_once_with(5)

    @pytest.mark.asyncio
    async def test_start_skips_seeding_by_default(self, monkeypatch):
        monkeypatch.setenv("LOOKUP_CACHE_BACKEND", "memory")
        service = LookupService()
        service.store.start = AsyncMock()
        service.store.seed = AsyncMock()

        await service.start()

        service.store.seed.assert_not_called()
