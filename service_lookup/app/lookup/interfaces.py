"""
Store contracts consumed by the lookup orchestrator.
"""

from typing import Optional, Protocol


class CacheStore(Protocol):
    """Key-value cache with per-entry expiry.

    ``get`` returns ``None`` for absent or expired keys. Backend failures
    raise, and are never reported as absence.
    """

    async def get(self, key: str, *, timeout: Optional[float] = None) -> Optional[str]:
        ...

    async def set(self, key: str, value: str, ttl_seconds: int, *, timeout: Optional[float] = None) -> None:
        ...

    async def ping(self) -> bool:
        ...

    async def close(self) -> None:
        ...


class DurableStore(Protocol):
    """Authoritative key-value store, read only on cache miss."""

    async def get(self, key: str, *, timeout: Optional[float] = None) -> Optional[str]:
        ...

    async def health_check(self) -> bool:
        ...
