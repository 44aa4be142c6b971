"""Cache-Freshness - logical-timestamp freshness tracking for cache entries.

Tracks when each named cache entry was last written and decides whether
an entry is still valid given the entries it depends on.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    MIN_VALID_KEY,
    UNSET_KEY_TIME,
    STATE_KEY,
    ContainerBackend,
    FreshnessSettings,
    get_settings,
)

from .core.exceptions import (
    FreshnessError,
    UninitializedStore,
    FreshnessConfigurationError,
)

from .core.value_objects import ActionType, FreshnessAction, KeyState
from .core.protocols import StateContainer
from .core.timestamps import MonotonicTimestampSource

from .application import (
    update_key,
    invalidate_key,
    transition,
    get_key_time,
    get_max_key_time,
    get_min_key_time,
    key_is_valid,
    FreshnessTracker,
)

from .infrastructure import (
    MemoryStateContainer,
    RedisStateContainer,
    create_state_container,
    create_freshness_tracker,
)

__all__ = [
    "__version__",

    # Configuration
    "MIN_VALID_KEY",
    "UNSET_KEY_TIME",
    "STATE_KEY",
    "ContainerBackend",
    "FreshnessSettings",
    "get_settings",

    # Exceptions
    "FreshnessError",
    "UninitializedStore",
    "FreshnessConfigurationError",

    # Core
    "ActionType",
    "FreshnessAction",
    "KeyState",
    "StateContainer",
    "MonotonicTimestampSource",

    # Application
    "update_key",
    "invalidate_key",
    "transition",
    "get_key_time",
    "get_max_key_time",
    "get_min_key_time",
    "key_is_valid",
    "FreshnessTracker",

    # Infrastructure
    "MemoryStateContainer",
    "RedisStateContainer",
    "create_state_container",
    "create_freshness_tracker",
]
