"""Freshness state transition function.

Given the current key state and an action, produce the next key state.
Never raises: unrecognised actions return the input state object itself
so callers can detect no-op transitions with an identity check.
"""

from typing import Any, Optional

from ..config.constants import UNSET_KEY_TIME
from ..core.timestamps.monotonic_timestamp_source import MonotonicTimestampSource
from ..core.value_objects.freshness_action import ActionType, get_action_type, get_action_key
from ..core.value_objects.key_state import KeyState, empty_key_state, with_key_time


def transition(
    state: Optional[KeyState],
    action: Any,
    timestamps: MonotonicTimestampSource
) -> KeyState:
    """Apply one action to a key state.

    Args:
        state: Current key state, None for the initial state
        action: UPDATE, INVALIDATE or any foreign action
        timestamps: Source consulted for UPDATE actions only

    Returns:
        A new key state for UPDATE/INVALIDATE, otherwise ``state`` unchanged
    """
    if state is None:
        state = empty_key_state()

    action_type = get_action_type(action)
    key = get_action_key(action)

    # A known tag without a usable key is treated as foreign
    if not isinstance(key, str):
        return state

    if action_type == ActionType.UPDATE.value:
        # Stored times may predate this source (restart, clock step back)
        timestamps.advance_to(max(state.values(), default=UNSET_KEY_TIME))
        return with_key_time(state, key, timestamps.next_timestamp())

    if action_type == ActionType.INVALIDATE.value:
        return with_key_time(state, key, UNSET_KEY_TIME)

    return state
