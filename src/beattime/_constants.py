"""Unit constants for Internet Time conversion."""

BEAT = 86400
"""Milliseconds in one beat (one day divided by 1000)."""

CENTIBEAT = BEAT // 100
"""Milliseconds in one centibeat (864)."""

BEATS_PER_DAY = 1000
"""Beats in one day; whole-beat readings run from 0 to 999."""

MILLIS_PER_DAY = BEAT * BEATS_PER_DAY
"""Milliseconds in one day; readings repeat with this period."""

UTC_OFFSET_MS = 3_600_000
"""Internet Time is referenced to UTC+1 (Biel Mean Time)."""
