"""Internal constants for kindtime.

These constants define the tick unit, the representable range and the
epochs used throughout the library. This module is not part of the public
API.
"""

from __future__ import annotations

# Tick unit conversions (1 tick = 100 nanoseconds)
NANOS_PER_TICK: int = 100
TICKS_PER_MICROSECOND: int = 10
TICKS_PER_MILLISECOND: int = 1_000 * TICKS_PER_MICROSECOND
TICKS_PER_SECOND: int = 1_000 * TICKS_PER_MILLISECOND
TICKS_PER_MINUTE: int = 60 * TICKS_PER_SECOND
TICKS_PER_HOUR: int = 60 * TICKS_PER_MINUTE
TICKS_PER_DAY: int = 24 * TICKS_PER_HOUR  # 864_000_000_000

SECONDS_PER_MINUTE: int = 60

# Year limits
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Ordinal of 10000-01-01 minus one, i.e. the number of days in years 1..9999
DAYS_TO_YEAR_10000: int = 3_652_059

MIN_TICKS: int = 0
MAX_TICKS: int = DAYS_TO_YEAR_10000 * TICKS_PER_DAY - 1

# Ordinal day number of 1970-01-01 (0001-01-01 is ordinal 1)
UNIX_EPOCH_ORDINAL: int = 719_163
UNIX_EPOCH_TICKS: int = (UNIX_EPOCH_ORDINAL - 1) * TICKS_PER_DAY

# Cumulative days before each month in a common year.
# Index 0 is unused, months are 1-indexed.
DAYS_BEFORE_MONTH: tuple[int, ...] = (
    0,
    0,    # January
    31,   # February
    59,   # March
    90,   # April
    120,  # May
    151,  # June
    181,  # July
    212,  # August
    243,  # September
    273,  # October
    304,  # November
    334,  # December
)

# Host offsets beyond this are rejected (UTC-14 .. UTC+14)
MAX_OFFSET_MINUTES: int = 14 * 60


__all__ = [
    "NANOS_PER_TICK",
    "TICKS_PER_MICROSECOND",
    "TICKS_PER_MILLISECOND",
    "TICKS_PER_SECOND",
    "TICKS_PER_MINUTE",
    "TICKS_PER_HOUR",
    "TICKS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_TO_YEAR_10000",
    "MIN_TICKS",
    "MAX_TICKS",
    "UNIX_EPOCH_ORDINAL",
    "UNIX_EPOCH_TICKS",
    "DAYS_BEFORE_MONTH",
    "MAX_OFFSET_MINUTES",
]
