"""Constants for cache-freshness.

Fixed values shared by the timestamp source, the reducer and the
validity checker.
"""

from enum import Enum
from typing import Final


# Any key time strictly below this is "unset or invalidated"
MIN_VALID_KEY: Final[int] = 1

# Stored for invalidated keys and returned for missing ones. Also the
# identity element when aggregating over an empty dependency list.
UNSET_KEY_TIME: Final[int] = MIN_VALID_KEY - 1

# Well-known namespace the key state lives under inside a state container
STATE_KEY: Final[str] = "__cache"

DEFAULT_REDIS_KEY_PREFIX: Final[str] = "freshness:"


class ContainerBackend(str, Enum):
    """Supported state container backends."""
    MEMORY = "memory"
    REDIS = "redis"
