"""
Settings for cache-freshness.

Environment-driven configuration for selecting and wiring the state
container that holds the key state.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import STATE_KEY, DEFAULT_REDIS_KEY_PREFIX, ContainerBackend


class FreshnessSettings(BaseSettings):
    """Freshness tracking settings.

    Every field can be overridden with a ``FRESHNESS_``-prefixed
    environment variable, e.g. ``FRESHNESS_BACKEND=redis``.
    """

    model_config = SettingsConfigDict(
        env_prefix="FRESHNESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Namespace the key state is stored under
    state_key: str = Field(default=STATE_KEY, min_length=1)

    # State container backend
    backend: ContainerBackend = Field(default=ContainerBackend.MEMORY)

    # Redis backend
    redis_url: Optional[str] = Field(default=None)
    redis_key_prefix: str = Field(default=DEFAULT_REDIS_KEY_PREFIX)

    # Debug-log every dispatched action
    log_dispatches: bool = Field(default=True)

    @property
    def is_redis_backend(self) -> bool:
        """Check if the Redis container is selected."""
        return self.backend == ContainerBackend.REDIS

    def get_redis_hash_name(self) -> str:
        """Name of the Redis hash holding the key state."""
        return f"{self.redis_key_prefix}{self.state_key}"


@lru_cache()
def get_settings() -> FreshnessSettings:
    """Get cached settings instance."""
    return FreshnessSettings()
