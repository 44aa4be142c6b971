"""Memory state container.

ONLY in-memory implementation - holds the key state in process for
single-instance deployments and tests.
"""

import logging
import threading
from typing import Any, Callable, Dict, Optional

from ...config.constants import STATE_KEY
from ...core.value_objects.freshness_action import get_action_type, get_action_key
from ...core.value_objects.key_state import KeyState, empty_key_state

logger = logging.getLogger(__name__)

Reducer = Callable[[Optional[KeyState], Any], KeyState]


class MemoryStateContainer:
    """Thread-safe in-memory state container.

    Dispatches are serialized by a lock. Reads take no lock and return
    the last published key state, which is never mutated afterwards.
    """

    def __init__(
        self,
        reducer: Reducer,
        initial_state: Optional[KeyState] = None,
        namespace: str = STATE_KEY,
        log_dispatches: bool = True
    ):
        """Initialize memory state container.

        Args:
            reducer: Transition function applied on every dispatch
            initial_state: Key state to start from, empty by default
            namespace: Name the key state is published under
            log_dispatches: Debug-log each applied action
        """
        self._reducer = reducer
        self._namespace = namespace
        self._state: KeyState = dict(initial_state) if initial_state else empty_key_state()
        self._log_dispatches = log_dispatches
        self._lock = threading.Lock()

    @property
    def namespace(self) -> str:
        """Namespace the key state is published under."""
        return self._namespace

    def get_state(self) -> KeyState:
        """Current key state."""
        return self._state

    def dispatch(self, action: Any) -> None:
        """Apply the reducer and publish the resulting key state."""
        with self._lock:
            next_state = self._reducer(self._state, action)
            if next_state is self._state:
                return
            self._state = next_state

        if self._log_dispatches:
            logger.debug(
                f"Dispatched {get_action_type(action)} for key '{get_action_key(action)}' "
                f"in namespace '{self._namespace}'"
            )

    def snapshot(self) -> Dict[str, KeyState]:
        """Whole container contents keyed by namespace."""
        return {self._namespace: self._state}
