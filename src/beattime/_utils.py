"""Argument validation helpers."""

from __future__ import annotations

from beattime._constants import BEATS_PER_DAY
from beattime._errors import (
    ERR_MSG_INVALID_BEAT_VALUE,
    ERR_MSG_INVALID_PRECISION,
    ERR_MSG_INVALID_TIMESTAMP,
    InvalidBeatValueError,
    InvalidPrecisionError,
    InvalidTimestampError,
)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_timestamp(timestamp_ms: object) -> int:
    """Reject anything that is not a plain integer millisecond count."""
    if not _is_int(timestamp_ms):
        raise InvalidTimestampError(
            ERR_MSG_INVALID_TIMESTAMP,
            f"timestamp must be an int of milliseconds, got {type(timestamp_ms).__name__}",
        )
    return timestamp_ms


def validate_precision(precision: object) -> int:
    if not _is_int(precision):
        raise InvalidPrecisionError(
            ERR_MSG_INVALID_PRECISION,
            f"precision must be an int, got {type(precision).__name__}",
        )
    if precision < 0:
        raise InvalidPrecisionError(
            ERR_MSG_INVALID_PRECISION,
            f"precision must be non-negative, got {precision}",
        )
    return precision


def validate_scaled(scaled: object, precision: int) -> int:
    """Check a scaled beat value lies in ``[0, 1000 * 10 ** precision)``."""
    if not _is_int(scaled):
        raise InvalidBeatValueError(
            ERR_MSG_INVALID_BEAT_VALUE,
            f"scaled value must be an int, got {type(scaled).__name__}",
        )
    if not 0 <= scaled < BEATS_PER_DAY * 10**precision:
        raise InvalidBeatValueError(
            ERR_MSG_INVALID_BEAT_VALUE,
            f"scaled value {scaled} out of range for precision {precision}",
        )
    return scaled
