"""Core temporal types.

This module provides the fundamental temporal types:
    - Date: Calendar date in the proleptic Gregorian calendar
    - Time: Time of day with tick precision
    - DateTime: Naive date and time tagged with a DateTimeKind
    - Duration: Signed time span with tick precision
"""

from __future__ import annotations

from kindtime.core.date import Date
from kindtime.core.datetime import DateTime
from kindtime.core.duration import Duration
from kindtime.core.time import Time

__all__: list[str] = [
    "Date",
    "DateTime",
    "Duration",
    "Time",
]
