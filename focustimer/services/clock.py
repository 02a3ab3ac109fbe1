"""
Time source used by the engine and the recorder.

Remaining time is computed from the monotonic clock so wall-clock changes
cannot stretch or shrink a phase. Record timestamps use the wall clock in UTC,
so records written on either side of a DST change still order correctly.
"""

import datetime
import time


class SystemClock:
    """Real clock. Tests substitute an object with the same two methods."""

    def now(self) -> datetime.datetime:
        return datetime.datetime.now(datetime.timezone.utc)

    def monotonic(self) -> float:
        return time.monotonic()
