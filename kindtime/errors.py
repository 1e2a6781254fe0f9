"""kindtime exception hierarchy.

All kindtime-specific exceptions inherit from KindtimeError. Every error
is a deterministic function of the input and is raised immediately; none
of them is retried internally.
"""

from __future__ import annotations


class KindtimeError(Exception):
    """Base exception for all kindtime errors."""

    pass


class InvalidCalendarDateError(KindtimeError):
    """Constructor fields do not name a real date or time.

    Examples:
        - Month value outside 1-12
        - Day 30 of February
        - Hour 25
    """

    pass


class TicksOutOfRangeError(KindtimeError):
    """A tick count or arithmetic result left the representable range.

    The representable range is 0001-01-01T00:00:00 through one tick
    before 10000-01-01T00:00:00.

    Examples:
        - DateTime.from_ticks(-1)
        - DateTime.max_value().add_ticks(1)
        - DateTime(9999, 12, 1).add_months(1)
    """

    pass


class UnsupportedKindTagError(KindtimeError):
    """A kind discriminator outside Unspecified (0), Utc (1), Local (2)."""

    pass


class InvalidFormatError(KindtimeError):
    """Text matches neither the RFC 3339 nor the RFC 2822 layout.

    Raised by DateTime.parse. DateTime.try_parse returns None instead.
    """

    pass


__all__ = [
    "KindtimeError",
    "InvalidCalendarDateError",
    "TicksOutOfRangeError",
    "UnsupportedKindTagError",
    "InvalidFormatError",
]
