"""Validity checker.

Read-side queries over a key state. All functions are total: unknown
keys and empty dependency lists resolve to the unset sentinel rather
than raising.
"""

from typing import Iterable

from ..config.constants import MIN_VALID_KEY, UNSET_KEY_TIME
from ..core.value_objects.key_state import KeyState


def get_key_time(state: KeyState, key: str) -> int:
    """Last-write time of ``key``.

    Returns UNSET_KEY_TIME for keys that were never written and for keys
    that were invalidated. The two cases cannot be told apart.
    """
    return state.get(key, UNSET_KEY_TIME)


def get_max_key_time(state: KeyState, keys: Iterable[str]) -> int:
    """Latest write time among ``keys``, UNSET_KEY_TIME when empty."""
    return max((get_key_time(state, key) for key in keys), default=UNSET_KEY_TIME)


def get_min_key_time(state: KeyState, keys: Iterable[str]) -> int:
    """Earliest write time among ``keys``, UNSET_KEY_TIME when empty."""
    return min((get_key_time(state, key) for key in keys), default=UNSET_KEY_TIME)


def key_is_valid(state: KeyState, key: str, dependencies: Iterable[str] = ()) -> bool:
    """Check whether ``key`` is still fresh against its dependencies.

    A key is valid when it has been written and was written strictly
    after every dependency. A dependency written at the same time as the
    key counts as stale.
    """
    key_time = get_key_time(state, key)
    if key_time < MIN_VALID_KEY:
        return False
    return key_time > get_max_key_time(state, dependencies)
