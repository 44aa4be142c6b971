"""Freshness factories."""

from .container_factory import create_state_container, create_freshness_tracker

__all__ = ["create_state_container", "create_freshness_tracker"]
