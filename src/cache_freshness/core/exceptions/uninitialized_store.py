"""Uninitialized store exception.

ONLY missing-container errors - raised when a tracker operation runs
before any state container has been registered.
"""

from typing import Optional

from .base import FreshnessError


class UninitializedStore(FreshnessError):
    """No state container registered.

    This is a programming error: register a container with
    ``FreshnessTracker.set_container`` before building actions or
    querying key times. It is never retried or absorbed.
    """

    def __init__(self, operation: Optional[str] = None):
        """Initialize uninitialized store error.

        Args:
            operation: Name of the tracker operation that was attempted
        """
        self.operation = operation
        message = "Store is not set"
        if operation:
            message = f"Store is not set: cannot run '{operation}' without a state container"
        super().__init__(
            message,
            error_code="STORE_NOT_INITIALIZED",
            details={"operation": operation} if operation else {},
        )
