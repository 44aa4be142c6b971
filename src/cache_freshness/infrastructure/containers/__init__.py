"""State container implementations."""

from .memory_state_container import MemoryStateContainer
from .redis_state_container import RedisStateContainer

__all__ = ["MemoryStateContainer", "RedisStateContainer"]
