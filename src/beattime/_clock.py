"""Entry points reading the current time or ``datetime`` objects."""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from beattime._converter import to_beat_time
from beattime._errors import ERR_MSG_INVALID_TIMESTAMP, InvalidTimestampError
from beattime.beat_time import BeatTime

Clock = Callable[[], int]
"""Zero-argument callable returning milliseconds since the Unix epoch."""

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def system_clock() -> int:
    return time.time_ns() // 1_000_000


def datetime_to_millis(dt: datetime) -> int:
    """Milliseconds since the epoch for a timezone-aware datetime.

    Sub-millisecond parts are floored.

    Raises:
        InvalidTimestampError: If ``dt`` is naive or not a datetime.
    """
    if not isinstance(dt, datetime):
        raise InvalidTimestampError(
            ERR_MSG_INVALID_TIMESTAMP,
            f"expected a datetime, got {type(dt).__name__}",
        )
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise InvalidTimestampError(
            "datetime must be timezone-aware",
            f"naive datetime {dt.isoformat()} has no UTC offset",
        )
    return (dt - _EPOCH) // _ONE_MS


def from_datetime(dt: datetime, precision: int = 0) -> BeatTime:
    """Internet Time for a timezone-aware datetime."""
    return to_beat_time(datetime_to_millis(dt), precision)


def now(precision: int = 0, *, clock: Clock | None = None) -> BeatTime:
    """Current Internet Time.

    Args:
        precision: Number of decimal digits after the whole beats.
        clock: Source of the current time in epoch milliseconds. Defaults
            to the system clock.
    """
    if clock is None:
        clock = system_clock
    return to_beat_time(clock(), precision)
