"""
PostgreSQL durable store for the Info Lookup service.
"""

import asyncio
import uuid
from typing import List, Optional

import asyncpg

from shared.logging import get_logger
from shared.errors import ExternalServiceError

_STORE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)


class PostgresInfoStore:
    """Authoritative info records in a single ``info`` table."""

    def __init__(self, dsn: str, *, min_size: int = 2, max_size: int = 10, command_timeout: float = 30):
        self.dsn = dsn
        self.min_size = min_size
        self.max_size = max_size
        self.command_timeout = command_timeout
        self.logger = get_logger("lookup.persistence.postgres")
        self.pool: Optional[asyncpg.Pool] = None

    async def start(self):
        """Open the connection pool."""
        try:
            self.pool = await asyncpg.create_pool(
                self.dsn,
                min_size=self.min_size,
                max_size=self.max_size,
                command_timeout=self.command_timeout
            )
            self.logger.info("PostgreSQL store started")
        except _STORE_ERRORS as e:
            self.logger.error("Failed to start PostgreSQL store", error=str(e))
            raise ExternalServiceError("postgres", str(e), {"operation": "start"}) from e

    async def stop(self):
        """Close the connection pool."""
        if self.pool:
            await self.pool.close()
            self.pool = None
            self.logger.info("PostgreSQL store stopped")

    async def ensure_schema(self):
        """Create the info table when missing."""
        async with self._pool().acquire() as conn:
            await conn.execute("""
                CREATE TABLE IF NOT EXISTS info (
                    id TEXT PRIMARY KEY,
                    data TEXT NOT NULL
                );
            """)

    async def seed(self, count: int) -> List[str]:
        """
        Insert ``count`` placeholder records and return their identifiers.

        Each record uses one freshly generated UUID string as both id and
        payload. Existing ids are left untouched.
        """
        if count < 0:
            raise ValueError("count must not be negative")

        ids = [str(uuid.uuid4()) for _ in range(count)]
        async with self._pool().acquire() as conn:
            async with conn.transaction():
                await conn.executemany(
                    "INSERT INTO info (id, data) VALUES ($1, $2) ON CONFLICT (id) DO NOTHING",
                    [(info_id, info_id) for info_id in ids]
                )

        self.logger.info("Seeded info records", count=len(ids))
        return ids

    async def get(self, key: str, *, timeout: Optional[float] = None) -> Optional[str]:
        """Return the payload for key, or None when no record exists."""
        try:
            if timeout is None:
                return await self._fetch_data(key)
            return await asyncio.wait_for(self._fetch_data(key), timeout)
        except _STORE_ERRORS as exc:
            message = str(exc) or type(exc).__name__
            raise ExternalServiceError("postgres", message, {"operation": "get", "key": key}) from exc

    async def _fetch_data(self, key: str) -> Optional[str]:
        async with self._pool().acquire() as conn:
            row = await conn.fetchrow("SELECT data FROM info WHERE id = $1", key)

        if row is None:
            return None
        return row["data"]

    async def health_check(self) -> bool:
        """Check database health."""
        if self.pool is None:
            return False
        try:
            async with self.pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
                return True
        except _STORE_ERRORS as exc:
            self.logger.error("PostgreSQL health check failed", error=str(exc))
            return False

    def _pool(self) -> asyncpg.Pool:
        if self.pool is None:
            raise ExternalServiceError("postgres", "Store not started")
        return self.pool
