"""
Data models for the Info Lookup service.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field


class LookupOutcome(str, Enum):
    """How a lookup was satisfied, or why it failed."""
    CACHE_HIT = "cache_hit"
    CACHE_MISS_STORE_HIT = "cache_miss_store_hit"
    NOT_FOUND = "not_found"
    CACHE_UNAVAILABLE = "cache_unavailable"
    DURABLE_UNAVAILABLE = "durable_unavailable"
    CACHE_WRITE_FAILED = "cache_write_failed"


@dataclass(frozen=True)
class LookupResult:
    """Successful lookup: the payload and the path that produced it."""

    data: str
    outcome: LookupOutcome

    @property
    def cache_hit(self) -> bool:
        return self.outcome is LookupOutcome.CACHE_HIT


class InfoResponse(BaseModel):
    """Response body for a successful lookup."""
    data: str = Field(..., description="Opaque payload stored for the identifier")
