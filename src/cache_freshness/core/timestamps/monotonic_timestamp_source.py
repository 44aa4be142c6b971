"""Monotonic timestamp source.

ONLY timestamp issuing - hands out strictly increasing integer
timestamps even when called many times within one clock tick.
"""

import logging
import threading
import time
from typing import Callable, Optional

from ...config.constants import UNSET_KEY_TIME

logger = logging.getLogger(__name__)


def milliseconds_clock() -> int:
    """Current wall-clock time in integer milliseconds."""
    return time.time_ns() // 1_000_000


class MonotonicTimestampSource:
    """Strictly increasing timestamp source.

    Reads a real-time clock and falls back to ``high_water_mark + 1``
    whenever the reading does not advance past the last value issued.
    Safe to share between threads.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None, high_water_mark: int = UNSET_KEY_TIME):
        """Initialize timestamp source.

        Args:
            clock: Callable returning the current time as an int, defaults
                to wall-clock milliseconds
            high_water_mark: Last value considered already issued
        """
        self._clock = clock or milliseconds_clock
        self._high_water_mark = high_water_mark
        self._lock = threading.Lock()

    @property
    def high_water_mark(self) -> int:
        """Greatest timestamp issued so far."""
        return self._high_water_mark

    def next_timestamp(self) -> int:
        """Issue a timestamp strictly greater than every previous one."""
        with self._lock:
            raw = self._clock()
            if raw > self._high_water_mark:
                output = raw
            else:
                output = self._high_water_mark + 1
                logger.debug(f"Clock reading {raw} did not advance, issuing {output}")
            self._high_water_mark = output
            return output

    def advance_to(self, value: int) -> None:
        """Raise the high-water mark to at least ``value``.

        Used when key times issued by an earlier source are already
        persisted, so the next timestamp lands above all of them.
        """
        with self._lock:
            if value > self._high_water_mark:
                self._high_water_mark = value
