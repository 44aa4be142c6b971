"""Configuration for cache-freshness."""

from .constants import (
    MIN_VALID_KEY,
    UNSET_KEY_TIME,
    STATE_KEY,
    DEFAULT_REDIS_KEY_PREFIX,
    ContainerBackend,
)
from .settings import FreshnessSettings, get_settings
from .logging_config import LoggingConfig, setup_logging

__all__ = [
    "MIN_VALID_KEY",
    "UNSET_KEY_TIME",
    "STATE_KEY",
    "DEFAULT_REDIS_KEY_PREFIX",
    "ContainerBackend",
    "FreshnessSettings",
    "get_settings",
    "LoggingConfig",
    "setup_logging",
]
