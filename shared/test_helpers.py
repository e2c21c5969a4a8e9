"""
Test helper functions and factory methods for the Info Lookup service.
"""

import uuid
from typing import Dict, List, Optional

from shared.errors import ExternalServiceError


class ManualClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeInfoStore:
    """In-memory durable store double that counts reads."""

    def __init__(self, entries: Optional[Dict[str, str]] = None):
        self.entries: Dict[str, str] = dict(entries or {})
        self.get_calls: List[str] = []
        self.fail_with: Optional[Exception] = None

    async def get(self, key: str, *, timeout: Optional[float] = None) -> Optional[str]:
        self.get_calls.append(key)
        if self.fail_with is not None:
            raise self.fail_with
        return self.entries.get(key)

    async def health_check(self) -> bool:
        return self.fail_with is None

    def fail(self, message: str = "connection refused") -> None:
        """Make every subsequent read raise a store error."""
        self.fail_with = ExternalServiceError("postgres", message)


class TestDataFactory:
    """Factory for creating test data."""

    @staticmethod
    def create_seed_entries(count: int = 100) -> Dict[str, str]:
        """Records keyed by a generated UUID string that is also the payload."""
        entries: Dict[str, str] = {}
        for _ in range(count):
            info_id = str(uuid.uuid4())
            entries[info_id] = info_id
        return entries
