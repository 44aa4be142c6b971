"""Redis state container.

ONLY Redis implementation - persists the key state as one Redis hash so
several processes can share freshness metadata.
"""

import logging
import threading
from typing import Any, Callable, Optional

from ...config.constants import STATE_KEY, DEFAULT_REDIS_KEY_PREFIX
from ...core.value_objects.freshness_action import get_action_type, get_action_key
from ...core.value_objects.key_state import KeyState, coerce_key_state

logger = logging.getLogger(__name__)

Reducer = Callable[[Optional[KeyState], Any], KeyState]


class RedisStateContainer:
    """Redis-backed state container.

    The key state lives in the hash ``<key_prefix><namespace>`` with one
    field per key. Dispatch reads the hash, runs the reducer and writes
    back only the fields that changed. The lock serializes dispatches
    within this process; run a single writer process per namespace.
    """

    def __init__(
        self,
        redis_client,
        reducer: Reducer,
        namespace: str = STATE_KEY,
        key_prefix: str = DEFAULT_REDIS_KEY_PREFIX,
        log_dispatches: bool = True
    ):
        """Initialize Redis state container.

        Args:
            redis_client: Synchronous redis-py client
            reducer: Transition function applied on every dispatch
            namespace: Namespace the key state is stored under
            key_prefix: Prefix for the Redis hash name
            log_dispatches: Debug-log each applied action
        """
        self._redis_client = redis_client
        self._reducer = reducer
        self._namespace = namespace
        self._hash_name = f"{key_prefix}{namespace}"
        self._log_dispatches = log_dispatches
        self._lock = threading.Lock()

    @property
    def namespace(self) -> str:
        """Namespace the key state is stored under."""
        return self._namespace

    @property
    def hash_name(self) -> str:
        """Redis hash holding the key state."""
        return self._hash_name

    def get_state(self) -> KeyState:
        """Current key state decoded from the Redis hash."""
        return coerce_key_state(self._redis_client.hgetall(self._hash_name))

    def dispatch(self, action: Any) -> None:
        """Apply the reducer and write changed fields back to Redis."""
        with self._lock:
            current = self.get_state()
            next_state = self._reducer(current, action)
            if next_state is current:
                return

            changed = {
                key: key_time
                for key, key_time in next_state.items()
                if current.get(key) != key_time
            }
            if changed:
                self._redis_client.hset(self._hash_name, mapping=changed)

        if self._log_dispatches:
            logger.debug(
                f"Dispatched {get_action_type(action)} for key '{get_action_key(action)}' "
                f"to redis hash '{self._hash_name}'"
            )

    def clear(self) -> None:
        """Drop the stored key state."""
        with self._lock:
            self._redis_client.delete(self._hash_name)
        logger.info(f"Cleared redis hash '{self._hash_name}'")
