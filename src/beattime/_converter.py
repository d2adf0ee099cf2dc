"""Conversion from UTC millisecond timestamps to Internet Time.

All arithmetic after input validation is done on integers: the timestamp is
shifted to UTC+1, scaled by ``10 ** precision`` and floor-divided by the
length of a beat, then reduced modulo one day's worth of scaled beats.
Python's ``//`` and ``%`` floor, so timestamps before the epoch stay in range.
"""

from __future__ import annotations

from beattime._constants import BEAT, BEATS_PER_DAY, UTC_OFFSET_MS
from beattime._utils import validate_precision, validate_timestamp
from beattime.beat_time import BeatTime


def millis_to_beats(ms: int | float) -> float:
    """Convert a length of time in milliseconds to beats.

    No offset or day wrap is applied: ``millis_to_beats(1380000)`` (23
    minutes) is ``15.97...``.
    """
    return ms / BEAT


def to_beat_time(timestamp_ms: int, precision: int = 0) -> BeatTime:
    """Compute the Internet Time of a UTC timestamp.

    Args:
        timestamp_ms: Milliseconds since the Unix epoch. Any sign or size.
        precision: Number of decimal digits after the whole beats.

    Returns:
        BeatTime holding the floored, day-relative value scaled by
        ``10 ** precision``.

    Raises:
        InvalidTimestampError: If ``timestamp_ms`` is not an int.
        InvalidPrecisionError: If ``precision`` is not a non-negative int.
    """
    timestamp_ms = validate_timestamp(timestamp_ms)
    precision = validate_precision(precision)

    scale = 10**precision
    scaled = (timestamp_ms + UTC_OFFSET_MS) * scale // BEAT
    return BeatTime(precision=precision, scaled=scaled % (BEATS_PER_DAY * scale))


def to_beats(timestamp_ms: int, precision: int = 0) -> int | float:
    """Internet Time of a UTC timestamp as a number.

    Returns an ``int`` in ``[0, 1000)`` at precision 0, otherwise a ``float``
    with ``precision`` decimal digits, e.g. ``333.25``.
    """
    return to_beat_time(timestamp_ms, precision).value


def to_display_string(timestamp_ms: int, precision: int = 0) -> str:
    """Internet Time of a UTC timestamp, zero-padded for display.

    Always three integer digits; ``precision`` digits follow a ``.`` when
    precision is positive (``"065"``, ``"333.25"``).
    """
    return str(to_beat_time(timestamp_ms, precision))


def from_posix(timestamp_ms: int) -> int:
    """Whole beats for a UTC timestamp."""
    return to_beat_time(timestamp_ms).scaled


def from_posix_custom(timestamp_ms: int, precision: int) -> int | float:
    return to_beats(timestamp_ms, precision)


def display_from_posix(timestamp_ms: int) -> str:
    return to_display_string(timestamp_ms)


def display_from_posix_custom(timestamp_ms: int, precision: int) -> str:
    return to_display_string(timestamp_ms, precision)
