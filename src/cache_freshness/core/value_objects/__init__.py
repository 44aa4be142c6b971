"""Freshness value objects."""

from .freshness_action import ActionType, FreshnessAction, get_action_type, get_action_key
from .key_state import KeyState, empty_key_state, with_key_time, coerce_key_state

__all__ = [
    "ActionType",
    "FreshnessAction",
    "get_action_type",
    "get_action_key",
    "KeyState",
    "empty_key_state",
    "with_key_time",
    "coerce_key_state",
]
