"""Timestamp sources."""

from .monotonic_timestamp_source import MonotonicTimestampSource, milliseconds_clock

__all__ = ["MonotonicTimestampSource", "milliseconds_clock"]
