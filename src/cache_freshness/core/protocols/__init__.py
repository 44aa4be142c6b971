"""Freshness protocols."""

from .state_container import StateContainer

__all__ = ["StateContainer"]
