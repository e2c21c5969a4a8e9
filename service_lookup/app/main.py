"""
Info Lookup service: cache-aside reads over Redis and PostgreSQL.
"""

from typing import Dict

from fastapi import Response

from shared.base_service import BaseService
from shared.errors import ValidationError

from .cache import MemoryInfoCache, RedisInfoCache
from .lookup import InfoLookupService
from .models import InfoResponse
from .persistence import PostgresInfoStore


class LookupService(BaseService):
    """Lookup service implementation."""

    def __init__(self):
        super().__init__("lookup", 8080)

        self.cache = self._create_cache()
        self.store = PostgresInfoStore(
            self.config.postgres_dsn,
            min_size=self.config.postgres_min_pool_size,
            max_size=self.config.postgres_max_pool_size
        )
        self.lookup_service = InfoLookupService(
            self.cache,
            self.store,
            ttl_seconds=self.config.cache_ttl_seconds,
            key_prefix=self.config.cache_key_prefix,
            metrics=self.metrics,
            cache_type=self.config.cache_backend
        )

        @self.app.on_event("startup")
        async def _startup():
            await self.start()

        @self.app.on_event("shutdown")
        async def _shutdown():
            await self.stop()

        self.app.state.lookup_service = self
        self._setup_lookup_routes()

    def _create_cache(self):
        backend = self.config.cache_backend.lower()
        if backend == "redis":
            return RedisInfoCache(self.config.redis_url)
        if backend == "memory":
            return MemoryInfoCache()
        raise ValidationError(
            f"Unsupported cache backend: {self.config.cache_backend}",
            {"supported": ["redis", "memory"]}
        )

    def _setup_lookup_routes(self):
        """Set up lookup-specific routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "lookup",
                "message": "Info Lookup Service",
                "version": "1.0.0",
                "capabilities": ["cache_aside", "redis", "postgres"]
            }

        @self.app.get("/get-info/{info_id}", response_model=InfoResponse)
        async def get_info(info_id: str, response: Response):
            """Return the payload stored for an identifier."""
            result = await self.lookup_service.lookup(
                info_id,
                timeout=self.config.request_timeout_seconds
            )
            response.headers["X-Cache"] = "HIT" if result.cache_hit else "MISS"
            return InfoResponse(data=result.data)

    async def _check_dependencies(self) -> Dict[str, str]:
        """Check lookup service dependencies."""
        return {
            "cache": "ok" if await self.cache.ping() else "error",
            "postgres": "ok" if await self.store.health_check() else "error",
        }

    async def start(self):
        """Start lookup service components."""
        await self.store.start()
        if isinstance(self.cache, RedisInfoCache):
            await self.cache.start()

        if self.config.seed_on_startup:
            await self.store.ensure_schema()
            seeded = await self.store.seed(self.config.seed_count)
            self.logger.info("Seeded durable store on startup", count=len(seeded))

        self.logger.info(
            "Lookup service started",
            cache_backend=self.config.cache_backend,
            cache_ttl_seconds=self.config.cache_ttl_seconds
        )

    async def stop(self):
        """Stop lookup service components."""
        await self.store.stop()
        await self.cache.close()
        self.logger.info("Lookup service stopped")


def create_app():
    """Create lookup service application."""
    service = LookupService()
    return service.app


if __name__ == "__main__":
    service = LookupService()
    service.run()
