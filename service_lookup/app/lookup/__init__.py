"""
Cache-aside lookup: store contracts, failure taxonomy and the orchestrator.
"""

from .exceptions import (
    CacheUnavailableError,
    CacheWriteFailedError,
    DurableUnavailableError,
    InfoNotFoundError,
    LookupFailure,
)
from .interfaces import CacheStore, DurableStore
from .orchestrator import DEFAULT_CACHE_TTL_SECONDS, InfoLookupService

__all__ = [
    "CacheStore",
    "DurableStore",
    "InfoLookupService",
    "DEFAULT_CACHE_TTL_SECONDS",
    "LookupFailure",
    "InfoNotFoundError",
    "CacheUnavailableError",
    "DurableUnavailableError",
    "CacheWriteFailedError",
]
