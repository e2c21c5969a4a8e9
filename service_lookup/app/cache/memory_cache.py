"""
In-process cache store with per-entry expiry.
"""

import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional


@dataclass
class _CacheEntry:
    value: str
    expires_at: float


class MemoryInfoCache:
    """Dict-backed cache honouring the same contract as the Redis store.

    Suitable for a single process only. The clock is injectable so expiry can
    be driven without sleeping.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._items: Dict[str, _CacheEntry] = {}

    async def get(self, key: str, *, timeout: Optional[float] = None) -> Optional[str]:
        entry = self._items.get(key)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            del self._items[key]
            return None
        return entry.value

    async def set(self, key: str, value: str, ttl_seconds: int, *, timeout: Optional[float] = None) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        now = self._clock()
        self._purge_expired(now)
        self._items[key] = _CacheEntry(value=value, expires_at=now + ttl_seconds)

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def _purge_expired(self, now: float) -> None:
        expired_keys = [key for key, entry in self._items.items() if entry.expires_at <= now]
        for key in expired_keys:
            del self._items[key]
