"""
End-to-end lookups over a seeded durable store.
"""

import asyncio
import random

import pytest

from service_lookup.app.cache import MemoryInfoCache
from service_lookup.app.lookup import InfoLookupService
from service_lookup.app.models import LookupOutcome
from shared.test_helpers import FakeInfoStore, TestDataFactory


@pytest.fixture
def seeded_store():
    return FakeInfoStore(TestDataFactory.create_seed_entries(100))


@pytest.fixture
def service(seeded_store):
    return InfoLookupService(MemoryInfoCache(), seeded_store)


@pytest.mark.asyncio
async def test_every_seeded_id_resolves_to_itself(service, seeded_store):
    """Miss then hit for each of the 100 seeded ids, with identical payloads."""
    assert len(seeded_store.entries) == 100

    for info_id in seeded_store.entries:
        first = await service.lookup(info_id)
        second = await service.lookup(info_id)

        assert first.outcome == LookupOutcome.CACHE_MISS_STORE_HIT
        assert second.outcome == LookupOutcome.CACHE_HIT
        assert first.data == second.data == info_id

    assert len(seeded_store.get_calls) == 100


@pytest.mark.asyncio
async def test_concurrent_lookups_over_seed(service, seeded_store):
    """Many concurrent lookups over distinct keys all succeed independently."""
    ids = random.sample(list(seeded_store.entries), 25)

    results = await asyncio.gather(*(service.lookup(info_id) for info_id in ids))

    assert [result.data for result in results] == ids
    assert sorted(seeded_store.get_calls) == sorted(ids)
