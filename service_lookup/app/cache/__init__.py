"""
Cache stores for the Info Lookup service.

Redis is the production backend; the in-memory store serves single-process
development and tests. Both report absence as None and raise on backend
failure.
"""

from .memory_cache import MemoryInfoCache
from .redis_cache import RedisInfoCache

__all__ = ["MemoryInfoCache", "RedisInfoCache"]
