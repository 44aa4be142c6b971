"""Pytest configuration and fixtures for cache-freshness tests."""

import pytest
from unittest.mock import MagicMock

from cache_freshness.application.services.freshness_tracker import FreshnessTracker
from cache_freshness.core.timestamps.monotonic_timestamp_source import MonotonicTimestampSource
from cache_freshness.infrastructure.containers.memory_state_container import MemoryStateContainer


class SteppingClock:
    """Clock returning a scripted sequence, repeating the last reading."""

    def __init__(self, *readings):
        self._readings = list(readings) or [1000]
        self.calls = 0

    def __call__(self):
        index = min(self.calls, len(self._readings) - 1)
        self.calls += 1
        return self._readings[index]


@pytest.fixture
def frozen_clock():
    """Clock that never advances."""
    return SteppingClock(1000)


@pytest.fixture
def timestamps(frozen_clock):
    """Timestamp source driven by the frozen clock."""
    return MonotonicTimestampSource(clock=frozen_clock)


@pytest.fixture
def tracker(timestamps):
    """Tracker with a registered in-memory container."""
    tracker = FreshnessTracker(timestamps=timestamps)
    tracker.set_container(MemoryStateContainer(tracker.reducer))
    return tracker


@pytest.fixture
def bare_tracker(timestamps):
    """Tracker with no container registered."""
    return FreshnessTracker(timestamps=timestamps)


@pytest.fixture
def redis_store():
    """Backing dict for the mock redis client."""
    return {}


@pytest.fixture
def mock_redis_client(redis_store):
    """Mock synchronous redis client storing hashes in ``redis_store``.

    Values come back as bytes like a real client without decode_responses.
    """
    client = MagicMock()

    def hgetall(name):
        return {
            field.encode(): str(value).encode()
            for field, value in redis_store.get(name, {}).items()
        }

    def hset(name, mapping=None, **kwargs):
        redis_store.setdefault(name, {}).update(mapping or {})
        return len(mapping or {})

    def delete(name):
        return 1 if redis_store.pop(name, None) is not None else 0

    client.hgetall.side_effect = hgetall
    client.hset.side_effect = hset
    client.delete.side_effect = delete
    return client
