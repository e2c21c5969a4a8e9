"""
Cache-aside lookup orchestration.
"""

import asyncio
import time
from typing import Optional, TYPE_CHECKING

from shared.logging import get_logger

from ..models import LookupOutcome, LookupResult
from .exceptions import (
    CacheUnavailableError,
    CacheWriteFailedError,
    DurableUnavailableError,
    InfoNotFoundError,
    LookupFailure,
)
from .interfaces import CacheStore, DurableStore

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


DEFAULT_CACHE_TTL_SECONDS = 600
DEFAULT_KEY_PREFIX = "info"


class InfoLookupService:
    """Reads through the cache to the durable store, populating the cache on miss.

    Failure policy is strict throughout: a cache read error fails the request
    instead of falling through to the durable store, and a failed cache write
    after a successful durable read fails the request as well. No retries are
    attempted at this layer.
    """

    def __init__(
        self,
        cache: CacheStore,
        store: DurableStore,
        *,
        ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS,
        key_prefix: str = DEFAULT_KEY_PREFIX,
        metrics: Optional["MetricsCollector"] = None,
        cache_type: str = "redis",
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.cache = cache
        self.store = store
        self.ttl_seconds = ttl_seconds
        self.key_prefix = key_prefix
        self.metrics = metrics
        self.cache_type = cache_type
        self.logger = get_logger("lookup.orchestrator")

    def cache_key(self, info_id: str) -> str:
        """Cache key for an identifier."""
        return f"{self.key_prefix}:{info_id}"

    async def lookup(self, info_id: str, *, timeout: Optional[float] = None) -> LookupResult:
        """
        Return the payload stored for ``info_id``.

        ``timeout`` is the total budget in seconds for this request; the
        remaining share is handed to each store call. Raises a
        ``LookupFailure`` subclass for every unsuccessful outcome.
        """
        start = time.perf_counter()
        outcome: Optional[LookupOutcome] = None
        try:
            result = await self._read_through(info_id, self._deadline(timeout))
            outcome = result.outcome
            return result
        except LookupFailure as exc:
            outcome = exc.outcome
            raise
        finally:
            if outcome is not None:
                self._record_outcome(outcome, time.perf_counter() - start)

    async def _read_through(self, info_id: str, deadline: Optional[float]) -> LookupResult:
        key = self.cache_key(info_id)

        try:
            cached = await self.cache.get(key, timeout=self._remaining(deadline))
        except Exception as exc:
            self.logger.error("Cache read failed", info_id=info_id, key=key, error=_describe(exc))
            raise CacheUnavailableError(info_id, _describe(exc)) from exc

        if cached is not None:
            self.logger.debug("Cache hit", info_id=info_id, key=key)
            return LookupResult(data=cached, outcome=LookupOutcome.CACHE_HIT)

        self.logger.debug("Cache miss", info_id=info_id, key=key)

        try:
            data = await self.store.get(info_id, timeout=self._remaining(deadline))
        except Exception as exc:
            self.logger.error("Durable store read failed", info_id=info_id, error=_describe(exc))
            raise DurableUnavailableError(info_id, _describe(exc)) from exc

        if data is None:
            self.logger.info("Info not found", info_id=info_id)
            raise InfoNotFoundError(info_id)

        try:
            await self.cache.set(key, data, self.ttl_seconds, timeout=self._remaining(deadline))
        except Exception as exc:
            self.logger.error("Cache write failed", info_id=info_id, key=key, error=_describe(exc))
            raise CacheWriteFailedError(info_id, _describe(exc)) from exc

        return LookupResult(data=data, outcome=LookupOutcome.CACHE_MISS_STORE_HIT)

    @staticmethod
    def _deadline(timeout: Optional[float]) -> Optional[float]:
        if timeout is None:
            return None
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        return asyncio.get_running_loop().time() + timeout

    @staticmethod
    def _remaining(deadline: Optional[float]) -> Optional[float]:
        """Seconds left before ``deadline``; raises once it has passed."""
        if deadline is None:
            return None
        remaining = deadline - asyncio.get_running_loop().time()
        if remaining <= 0:
            raise asyncio.TimeoutError("lookup deadline exceeded")
        return remaining

    def _record_outcome(self, outcome: LookupOutcome, duration: float) -> None:
        if not self.metrics:
            return

        self.metrics.increment_counter("lookups_total", outcome=outcome.value)
        self.metrics.observe_histogram("lookup_duration_seconds", duration, outcome=outcome.value)
        if outcome is LookupOutcome.CACHE_HIT:
            self.metrics.increment_counter("cache_hits_total", cache_type=self.cache_type)
        elif outcome is not LookupOutcome.CACHE_UNAVAILABLE:
            self.metrics.increment_counter("cache_misses_total", cache_type=self.cache_type)


def _describe(exc: BaseException) -> str:
    message = str(exc)
    return message or type(exc).__name__
