"""
Redis cache store for the Info Lookup service.
"""

import asyncio
from typing import Any, Awaitable, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from shared.logging import get_logger
from shared.errors import ExternalServiceError


class RedisInfoCache:
    """Redis-backed cache of info payloads with per-key expiry."""

    def __init__(self, redis_url: str, *, socket_timeout: float = 5.0, client: Optional[redis.Redis] = None):
        self.redis_url = redis_url
        self.logger = get_logger("lookup.cache.redis")
        self.redis = client if client is not None else redis.from_url(
            redis_url,
            encoding="utf-8",
            decode_responses=True,
            socket_connect_timeout=socket_timeout,
            socket_timeout=socket_timeout,
            health_check_interval=30
        )

    async def start(self):
        """Verify the connection."""
        try:
            await self.redis.ping()
            self.logger.info("Redis cache started")
        except (RedisError, OSError) as e:
            self.logger.error("Failed to start Redis cache", error=str(e))
            raise ExternalServiceError("redis", str(e), {"operation": "start"}) from e

    async def close(self) -> None:
        """Close Redis connections."""
        await self.redis.aclose()
        self.logger.info("Redis cache stopped")

    async def get(self, key: str, *, timeout: Optional[float] = None) -> Optional[str]:
        """Return the cached value, or None when the key is absent or expired."""
        value = await self._execute("get", key, self.redis.get(key), timeout)
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str, ttl_seconds: int, *, timeout: Optional[float] = None) -> None:
        """Store value under key, replacing any existing entry, expiring after ttl_seconds."""
        await self._execute("set", key, self.redis.set(key, value, ex=ttl_seconds), timeout)
        self.logger.debug("Cached value", key=key, ttl=ttl_seconds)

    async def ping(self) -> bool:
        """Return True when Redis responds to a ping."""
        try:
            return bool(await self.redis.ping())
        except (RedisError, OSError) as exc:
            self.logger.error("Redis health check failed", error=str(exc))
            return False

    async def _execute(self, operation: str, key: str, call: Awaitable[Any], timeout: Optional[float]) -> Any:
        try:
            if timeout is None:
                return await call
            return await asyncio.wait_for(call, timeout)
        except (RedisError, OSError, asyncio.TimeoutError) as exc:
            message = str(exc) or type(exc).__name__
            raise ExternalServiceError(
                "redis",
                message,
                {"operation": operation, "key": key}
            ) from exc
