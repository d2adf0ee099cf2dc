"""beattime - Convert UTC timestamps to Swatch Internet Time (.beats)."""

from __future__ import annotations

try:
    from beattime._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from beattime._clock import datetime_to_millis, from_datetime, now
from beattime._constants import BEAT, CENTIBEAT
from beattime._converter import (
    display_from_posix,
    display_from_posix_custom,
    from_posix,
    from_posix_custom,
    millis_to_beats,
    to_beat_time,
    to_beats,
    to_display_string,
)
from beattime._errors import (
    BeatTimeError,
    InvalidBeatValueError,
    InvalidPrecisionError,
    InvalidTimestampError,
)
from beattime.beat_time import BeatTime

__all__ = [
    "BEAT",
    "CENTIBEAT",
    "millis_to_beats",
    "to_beat_time",
    "to_beats",
    "to_display_string",
    "from_posix",
    "from_posix_custom",
    "display_from_posix",
    "display_from_posix_custom",
    "from_datetime",
    "datetime_to_millis",
    "now",
    "BeatTime",
    "BeatTimeError",
    "InvalidBeatValueError",
    "InvalidPrecisionError",
    "InvalidTimestampError",
]
