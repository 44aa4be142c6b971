"""Freshness domain exceptions.

One exception per file.
"""

from .base import FreshnessError
from .uninitialized_store import UninitializedStore
from .configuration_error import FreshnessConfigurationError

__all__ = [
    "FreshnessError",
    "UninitializedStore",
    "FreshnessConfigurationError",
]
