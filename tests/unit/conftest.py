"""Shared fixtures and mocks for unit tests."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from transient_cache.monitoring import metrics
from transient_cache.pool import CacheItemPool
from transient_cache.serialization import PickleSerializer
from transient_cache.simple import SimpleCache
from transient_cache.storage.memory import InMemoryTransientStore


class FakeClock:
    """Manually advanced replacement for time.time."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def reset_metrics():
    """Give every test fresh counters."""
    for counter in (metrics.cache_lookups_total, metrics.cache_writes_total, metrics.cache_deletes_total):
        counter.reset()
    yield


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_store(clock):
    """In-memory store driven by the fake clock."""
    return InMemoryTransientStore(clock=clock)


@pytest.fixture
def spy_store(memory_store):
    """Memory store wrapped so calls can be counted."""
    spy = Mock(wraps=memory_store)
    spy.can_flush = memory_store.can_flush
    return spy


@pytest.fixture
def serializer():
    return PickleSerializer()


@pytest.fixture
def pool(memory_store, serializer):
    return CacheItemPool(store=memory_store, serializer=serializer)


@pytest.fixture
def cache(pool):
    return SimpleCache(pool)


@pytest.fixture
def mock_redis_client():
    """Mock synchronous Redis client."""
    client = Mock()
    client.ping = Mock(return_value=True)
    client.get = Mock(return_value=None)
    client.set = Mock(return_value=True)
    client.delete = Mock(return_value=1)
    client.exists = Mock(return_value=0)
    client.flushdb = Mock(return_value=True)
    return client


@pytest.fixture
def no_flush_store():
    """Store double without a global flush capability."""
    store = Mock()
    store.can_flush = False
    return store
