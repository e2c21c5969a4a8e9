"""
Lookup failure taxonomy.

Every failure the orchestrator can produce is one of these classes; each
declares the HTTP status it maps to so the transport layer needs no table of
its own.
"""

from typing import Any, Dict, Optional

from shared.errors import ServiceException

from ..models import LookupOutcome


class LookupFailure(ServiceException):
    """Base class for terminal lookup failures."""

    outcome: LookupOutcome

    def __init__(self, code: str, message: str, info_id: str, details: Optional[Dict[str, Any]] = None):
        self.info_id = info_id
        merged = {"info_id": info_id}
        merged.update(details or {})
        super().__init__(code, message, merged)


class InfoNotFoundError(LookupFailure):
    """No record exists in the durable store for the identifier."""

    outcome = LookupOutcome.NOT_FOUND
    status_code = 404

    def __init__(self, info_id: str):
        super().__init__("NOT_FOUND", "Data not found", info_id)


class CacheUnavailableError(LookupFailure):
    """The cache could not be read for reasons other than absence."""

    outcome = LookupOutcome.CACHE_UNAVAILABLE

    def __init__(self, info_id: str, reason: str):
        super().__init__("CACHE_UNAVAILABLE", "Failed to check cache", info_id, {"reason": reason})


class DurableUnavailableError(LookupFailure):
    """The durable store could not be read for reasons other than absence."""

    outcome = LookupOutcome.DURABLE_UNAVAILABLE

    def __init__(self, info_id: str, reason: str):
        super().__init__("DURABLE_UNAVAILABLE", "Failed to query durable store", info_id, {"reason": reason})


class CacheWriteFailedError(LookupFailure):
    """Populating the cache after a durable read failed."""

    outcome = LookupOutcome.CACHE_WRITE_FAILED

    def __init__(self, info_id: str, reason: str):
        super().__init__("CACHE_WRITE_FAILED", "Failed to store data in cache", info_id, {"reason": reason})
