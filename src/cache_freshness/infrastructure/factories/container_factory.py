"""State container factory.

Builds the state container selected by settings and wires it to a
freshness tracker.
"""

import logging
from typing import Callable, Optional

import redis

from ...application.services.freshness_tracker import FreshnessTracker
from ...config.constants import ContainerBackend
from ...config.settings import FreshnessSettings, get_settings
from ...core.exceptions.configuration_error import FreshnessConfigurationError
from ...core.protocols.state_container import StateContainer
from ...core.timestamps.monotonic_timestamp_source import MonotonicTimestampSource
from ..containers.memory_state_container import MemoryStateContainer, Reducer
from ..containers.redis_state_container import RedisStateContainer

logger = logging.getLogger(__name__)


def create_state_container(
    reducer: Reducer,
    settings: Optional[FreshnessSettings] = None,
    redis_client=None
) -> StateContainer:
    """Create the state container selected by ``settings.backend``.

    Args:
        reducer: Transition function the container applies on dispatch
        settings: Settings to read, defaults to environment settings
        redis_client: Pre-built redis client, overrides settings.redis_url

    Raises:
        FreshnessConfigurationError: If the backend cannot be built
    """
    settings = settings or get_settings()

    if settings.backend == ContainerBackend.MEMORY:
        logger.debug(f"Creating memory state container for namespace '{settings.state_key}'")
        return MemoryStateContainer(
            reducer,
            namespace=settings.state_key,
            log_dispatches=settings.log_dispatches,
        )

    if settings.backend == ContainerBackend.REDIS:
        if redis_client is None:
            if not settings.redis_url:
                raise FreshnessConfigurationError.missing_redis_client()
            redis_client = redis.Redis.from_url(settings.redis_url)
        logger.debug(f"Creating redis state container for hash '{settings.get_redis_hash_name()}'")
        return RedisStateContainer(
            redis_client,
            reducer,
            namespace=settings.state_key,
            key_prefix=settings.redis_key_prefix,
            log_dispatches=settings.log_dispatches,
        )

    # FreshnessSettings validates backend, so this is only reachable with
    # settings built via model_construct or mutated after validation
    raise FreshnessConfigurationError.unknown_backend(str(settings.backend))


def create_freshness_tracker(
    settings: Optional[FreshnessSettings] = None,
    redis_client=None,
    clock: Optional[Callable[[], int]] = None
) -> FreshnessTracker:
    """Create a freshness tracker with a registered state container."""
    tracker = FreshnessTracker(timestamps=MonotonicTimestampSource(clock=clock))
    tracker.set_container(create_state_container(tracker.reducer, settings, redis_client))
    return tracker
