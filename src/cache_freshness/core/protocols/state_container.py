"""State container protocol.

ONLY the storage contract - what the freshness tracker needs from
whatever holds the key state between calls.
"""

from typing import Any
from typing_extensions import Protocol, runtime_checkable

from ..value_objects.key_state import KeyState


@runtime_checkable
class StateContainer(Protocol):
    """State container protocol.

    Any persistence mechanism works as long as it provides both
    capabilities below.
    """

    def get_state(self) -> KeyState:
        """Return the key state currently stored under the container's namespace."""
        ...

    def dispatch(self, action: Any) -> None:
        """Apply the reducer to the current state and persist the result.

        Must complete synchronously before returning, and must serialize
        concurrent dispatches so no update is lost.
        """
        ...
