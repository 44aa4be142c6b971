"""Key state value object.

ONLY the key -> last-write timestamp mapping and helpers to build it.
A key state is never mutated in place; every transition yields a new
dict so readers always hold a consistent snapshot.
"""

from typing import Dict, Mapping, Optional


KeyState = Mapping[str, int]


def empty_key_state() -> Dict[str, int]:
    """Initial key state."""
    return {}


def with_key_time(state: KeyState, key: str, key_time: int) -> Dict[str, int]:
    """Copy of ``state`` with ``key`` set to ``key_time``."""
    return {**state, key: key_time}


def coerce_key_state(raw: Optional[Mapping]) -> Dict[str, int]:
    """Decode a stored mapping into a key state.

    Backends such as Redis hand back bytes for both field names and
    values.
    """
    if not raw:
        return empty_key_state()
    decoded = {}
    for key, value in raw.items():
        if isinstance(key, bytes):
            key = key.decode("utf-8")
        decoded[key] = int(value)
    return decoded
