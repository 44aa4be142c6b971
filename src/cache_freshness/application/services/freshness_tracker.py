"""Freshness tracker service.

ONLY freshness orchestration - the context object owning a timestamp
source and a handle to the state container. Builds actions, exposes the
bound reducer and answers validity queries against the container's
current key state.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from ...core.exceptions.uninitialized_store import UninitializedStore
from ...core.protocols.state_container import StateContainer
from ...core.timestamps.monotonic_timestamp_source import MonotonicTimestampSource
from ...core.value_objects.freshness_action import FreshnessAction
from ...core.value_objects.key_state import KeyState
from .. import actions, validity_checker
from ..reducer import transition

logger = logging.getLogger(__name__)


class FreshnessTracker:
    """Freshness tracker.

    Each instance is independent: it has its own high-water mark and
    its own container, so several trackers can coexist in one process.

    Usage:
        tracker = FreshnessTracker()
        tracker.set_container(MemoryStateContainer(tracker.reducer))
        tracker.touch("report")
        tracker.key_is_valid("report", ["source-data"])
    """

    def __init__(
        self,
        container: Optional[StateContainer] = None,
        timestamps: Optional[MonotonicTimestampSource] = None
    ):
        """Initialize freshness tracker.

        Args:
            container: State container to read and dispatch through
            timestamps: Timestamp source used by the reducer
        """
        self._timestamps = timestamps or MonotonicTimestampSource()
        self._container = container

    @property
    def container(self) -> Optional[StateContainer]:
        """Currently registered state container."""
        return self._container

    @property
    def timestamps(self) -> MonotonicTimestampSource:
        """Timestamp source backing UPDATE actions."""
        return self._timestamps

    def set_container(self, container: Optional[StateContainer]) -> None:
        """Register a state container, or deregister with None."""
        self._container = container
        if container is None:
            logger.info("State container deregistered")
        else:
            logger.info(f"State container registered: {type(container).__name__}")

    # Action constructors

    def update_key(self, key: str) -> FreshnessAction:
        """Build an UPDATE action for ``key``."""
        self._require_container("update_key")
        return actions.update_key(key)

    touch_key = update_key

    def invalidate_key(self, key: str) -> FreshnessAction:
        """Build an INVALIDATE action for ``key``."""
        self._require_container("invalidate_key")
        return actions.invalidate_key(key)

    # Transition

    def reducer(self, state: Optional[KeyState], action: Any) -> KeyState:
        """Transition function bound to this tracker's timestamp source.

        Containers are built with this callable, so it does not need a
        registered container itself.
        """
        return transition(state, action, self._timestamps)

    # Convenience writers

    def touch(self, key: str) -> int:
        """Dispatch an UPDATE for ``key`` and return its new key time."""
        container = self._require_container("touch")
        container.dispatch(actions.update_key(key))
        return self.get_key_time(key)

    def invalidate(self, key: str) -> None:
        """Dispatch an INVALIDATE for ``key``."""
        container = self._require_container("invalidate")
        container.dispatch(actions.invalidate_key(key))

    # Queries

    def get_state(self) -> Dict[str, int]:
        """Copy of the container's current key state."""
        return dict(self._current_state("get_state"))

    def get_key_time(self, key: str) -> int:
        """Last-write time of ``key``.

        Never-written and invalidated keys both return MIN_VALID_KEY - 1.
        """
        return validity_checker.get_key_time(self._current_state("get_key_time"), key)

    def get_max_key_time(self, keys: Iterable[str]) -> int:
        """Latest write time among ``keys``."""
        return validity_checker.get_max_key_time(self._current_state("get_max_key_time"), keys)

    def get_min_key_time(self, keys: Iterable[str]) -> int:
        """Earliest write time among ``keys``."""
        return validity_checker.get_min_key_time(self._current_state("get_min_key_time"), keys)

    def key_is_valid(self, key: str, dependencies: Iterable[str] = ()) -> bool:
        """Check whether ``key`` was written after all of ``dependencies``."""
        state = self._current_state("key_is_valid")
        return validity_checker.key_is_valid(state, key, dependencies)

    def _require_container(self, operation: str) -> StateContainer:
        if self._container is None:
            raise UninitializedStore(operation)
        return self._container

    def _current_state(self, operation: str) -> KeyState:
        # One read per query so every lookup sees the same snapshot
        return self._require_container(operation).get_state()
