"""Kindtime: a kind-tagged calendar timestamp library.

Kindtime provides a DateTime that stores a naive calendar instant with
100 nanosecond (tick) precision and a kind tag telling whether it is UTC,
local, or unspecified. Local conversions go through a replaceable host
clock.

Core Types:
    DateTime: Naive date and time tagged with a DateTimeKind
    Date: Calendar date (year, month, day)
    Time: Time of day (hour, minute, second, fraction)
    Duration: Signed time span with tick precision

Units:
    DateTimeKind: UNSPECIFIED, UTC or LOCAL

Clocks:
    SystemClock: Host time and zone
    FixedOffsetClock: Constant offset with an optional frozen "now"

Exceptions:
    KindtimeError: Base exception
    InvalidCalendarDateError: Fields do not name a real date or time
    TicksOutOfRangeError: Value outside 0001-01-01 .. 9999-12-31
    UnsupportedKindTagError: Kind tag outside 0..2
    InvalidFormatError: Text matches no supported layout

Example:
    >>> from kindtime import DateTime, DateTimeKind
    >>> dt = DateTime(2024, 1, 31, 9, 30, kind=DateTimeKind.UTC)
    >>> dt.add_months(1).to_string("yyyy-MM-dd hh:mm")
    '2024-02-29 09:30'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from kindtime.core.date import Date
from kindtime.core.datetime import DateTime
from kindtime.core.duration import Duration
from kindtime.core.time import Time

# Units
from kindtime.units.kind import DateTimeKind

# Clocks and configuration
from kindtime.clock import FixedOffsetClock, HostClock, SystemClock
from kindtime.config import get_clock, set_clock, use_clock

# Exceptions
from kindtime.errors import (
    InvalidCalendarDateError,
    InvalidFormatError,
    KindtimeError,
    TicksOutOfRangeError,
    UnsupportedKindTagError,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTime",
    "Duration",
    "Time",
    # Units
    "DateTimeKind",
    # Clocks and configuration
    "HostClock",
    "SystemClock",
    "FixedOffsetClock",
    "get_clock",
    "set_clock",
    "use_clock",
    # Exceptions
    "KindtimeError",
    "InvalidCalendarDateError",
    "TicksOutOfRangeError",
    "UnsupportedKindTagError",
    "InvalidFormatError",
]
