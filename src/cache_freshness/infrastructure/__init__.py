"""Freshness infrastructure."""

from .containers import MemoryStateContainer, RedisStateContainer
from .factories import create_state_container, create_freshness_tracker

__all__ = [
    "MemoryStateContainer",
    "RedisStateContainer",
    "create_state_container",
    "create_freshness_tracker",
]
