"""Freshness application layer."""

from .actions import update_key, invalidate_key
from .reducer import transition
from .validity_checker import get_key_time, get_max_key_time, get_min_key_time, key_is_valid
from .services import FreshnessTracker

__all__ = [
    "update_key",
    "invalidate_key",
    "transition",
    "get_key_time",
    "get_max_key_time",
    "get_min_key_time",
    "key_is_valid",
    "FreshnessTracker",
]
