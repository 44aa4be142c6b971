"""Freshness application services."""

from .freshness_tracker import FreshnessTracker

__all__ = ["FreshnessTracker"]
