"""RFC 3339 parsing.

RFC 3339 is the internet profile of ISO 8601. This parser accepts:

1. Date and time separated by 'T', 't' or a single space
2. Optional fractional seconds of any length (digits past the seventh
   are truncated, as one tick is 100 nanoseconds)
3. A required offset, 'Z' or '+/-HH:MM'
4. Leap second 60, read as 59.9999999 of the same minute

The parsed wall time is normalized to UTC using its offset and returned
as an UNSPECIFIED DateTime.

Examples:
    >>> parse_rfc3339("2024-01-15T14:30:45Z")
    DateTime(2024, 1, 15, 14, 30, 45, nanosecond=0, kind=UNSPECIFIED)

    >>> parse_rfc3339("2024-01-15T14:30:45+05:30").hour
    9
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from kindtime._internal.constants import TICKS_PER_SECOND
from kindtime.errors import InvalidCalendarDateError, InvalidFormatError, TicksOutOfRangeError

if TYPE_CHECKING:
    from kindtime.core.datetime import DateTime


# YYYY-MM-DDTHH:MM:SS[.fraction]Z or YYYY-MM-DDTHH:MM:SS[.fraction]+/-HH:MM
_RFC3339_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})"  # Date: YYYY-MM-DD
    r"[Tt ]"  # separator
    r"(\d{2}):(\d{2}):(\d{2})"  # Time: HH:MM:SS
    r"(?:\.(\d+))?"  # Optional fractional seconds
    r"([Zz]|[+-]\d{2}:\d{2})$"  # Required offset
)

_FRACTION_DIGITS = 7


def _parse_offset(text: str) -> int:
    """Return the offset in minutes east of UTC for 'Z' or '+/-HH:MM'."""
    if text in ("Z", "z"):
        return 0
    hours = int(text[1:3])
    minutes = int(text[4:6])
    if hours > 23 or minutes > 59:
        raise InvalidFormatError(f"offset out of range: {text!r}")
    total = hours * 60 + minutes
    return -total if text[0] == "-" else total


def parse_rfc3339(s: str) -> DateTime:
    """Parse an RFC 3339 date-time string.

    Args:
        s: The text to parse. Surrounding whitespace is ignored.

    Returns:
        An UNSPECIFIED DateTime holding the UTC instant.

    Raises:
        InvalidFormatError: If the text does not match the layout or its
            fields are out of range.

    Examples:
        >>> parse_rfc3339("2024-01-15 14:30:45.123456789-01:00")
        DateTime(2024, 1, 15, 15, 30, 45, nanosecond=123456700, kind=UNSPECIFIED)

        >>> parse_rfc3339("2024-01-15T14:30:45")
        Traceback (most recent call last):
        ...
        InvalidFormatError: Invalid RFC 3339 format: '2024-01-15T14:30:45'...
    """
    from kindtime.core.datetime import DateTime

    s = s.strip()
    if not s:
        raise InvalidFormatError("empty string")

    match = _RFC3339_PATTERN.match(s)
    if not match:
        raise InvalidFormatError(
            f"Invalid RFC 3339 format: {s!r}. "
            "Expected YYYY-MM-DDTHH:MM:SS[.fraction]Z or "
            "YYYY-MM-DDTHH:MM:SS[.fraction]+/-HH:MM"
        )

    year = int(match.group(1))
    month = int(match.group(2))
    day = int(match.group(3))
    hour = int(match.group(4))
    minute = int(match.group(5))
    second = int(match.group(6))

    frac_str = match.group(7)
    if frac_str:
        fraction = int(frac_str.ljust(_FRACTION_DIGITS, "0")[:_FRACTION_DIGITS])
    else:
        fraction = 0

    # A leap second reads as the last tick of second 59
    if second == 60:
        second = 59
        fraction = TICKS_PER_SECOND - 1

    offset = _parse_offset(match.group(8))

    try:
        return DateTime._from_wall_fields(
            year, month, day, hour, minute, second, fraction, offset
        )
    except (InvalidCalendarDateError, TicksOutOfRangeError) as e:
        raise InvalidFormatError(f"Invalid RFC 3339 value {s!r}: {e}") from e


__all__ = ["parse_rfc3339"]
