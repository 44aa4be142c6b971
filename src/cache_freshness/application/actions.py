"""Action constructors.

Plain builders for the two actions the reducer understands. The tracker
wraps these with its container check.
"""

from ..core.value_objects.freshness_action import FreshnessAction


def update_key(key: str) -> FreshnessAction:
    """Build an action marking ``key`` as freshly written."""
    return FreshnessAction.update(key)


def invalidate_key(key: str) -> FreshnessAction:
    """Build an action forcibly expiring ``key``."""
    return FreshnessAction.invalidate(key)
