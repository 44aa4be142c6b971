"""Configuration exception.

ONLY wiring errors - raised when settings cannot produce a usable
state container.
"""

from .base import FreshnessError


class FreshnessConfigurationError(FreshnessError):
    """Settings do not describe a usable state container."""

    @classmethod
    def missing_redis_client(cls) -> "FreshnessConfigurationError":
        """Create exception for a Redis backend with nothing to connect to."""
        return cls(
            "Redis backend selected but no redis client or redis_url was provided",
            error_code="REDIS_CLIENT_MISSING",
        )

    @classmethod
    def unknown_backend(cls, backend: str) -> "FreshnessConfigurationError":
        """Create exception for an unsupported backend name."""
        return cls(
            f"Unknown state container backend '{backend}'",
            error_code="UNKNOWN_BACKEND",
            details={"backend": backend},
        )
