"""Freshness action value object.

ONLY action shape - the tagged values dispatched into a state container
to mark a key as freshly written or to expire it.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ActionType(str, Enum):
    """Action kinds understood by the freshness reducer."""

    UPDATE = "FreshnessActions.UPDATE"
    INVALIDATE = "FreshnessActions.INVALIDATE"


@dataclass(frozen=True)
class FreshnessAction:
    """Freshness action value object.

    Built by the tracker's action constructors and consumed once by the
    reducer.
    """

    type: ActionType
    key: str

    def __post_init__(self):
        """Validate action on creation."""
        if not isinstance(self.key, str):
            raise TypeError(f"Action key must be a string, got {type(self.key).__name__}")

    @classmethod
    def update(cls, key: str) -> "FreshnessAction":
        """Create an UPDATE action."""
        return cls(ActionType.UPDATE, key)

    @classmethod
    def invalidate(cls, key: str) -> "FreshnessAction":
        """Create an INVALIDATE action."""
        return cls(ActionType.INVALIDATE, key)

    def to_dict(self) -> dict:
        """Convert action to a plain dictionary."""
        return {"type": self.type.value, "key": self.key}


def get_action_type(action: Any) -> Optional[str]:
    """Read the type tag of any action-like value.

    Accepts FreshnessAction, foreign objects exposing ``type`` and plain
    mappings with a ``"type"`` entry. Returns None when there is no tag.
    """
    if isinstance(action, Mapping):
        action_type = action.get("type")
    else:
        action_type = getattr(action, "type", None)
    if isinstance(action_type, Enum):
        return action_type.value
    return action_type


def get_action_key(action: Any) -> Optional[str]:
    """Read the key carried by an action-like value."""
    if isinstance(action, Mapping):
        return action.get("key")
    return getattr(action, "key", None)
