"""RFC 2822 parsing.

RFC 2822 is the date-time layout of email headers, for example
``Tue, 5 Mar 2024 10:15:30 +0200``. This parser accepts:

- An optional day-of-week name followed by a comma; when present it must
  agree with the date
- A 1-2 digit day, an English month abbreviation and a 2-4 digit year
  (two-digit years below 50 are 20xx, other short years add 1900)
- HH:MM with optional :SS
- A numeric '+/-HHMM' offset or one of the obsolete zone names
  UT, GMT, Z, EST, EDT, CST, CDT, MST, MDT, PST, PDT

Names are matched case-insensitively. The parsed wall time is normalized
to UTC using its offset and returned as an UNSPECIFIED DateTime.

Examples:
    >>> parse_rfc2822("Tue, 5 Mar 2024 10:15:30 GMT")
    DateTime(2024, 3, 5, 10, 15, 30, nanosecond=0, kind=UNSPECIFIED)
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from kindtime._internal.calendar import ordinal_to_day_of_week, ymd_to_ordinal
from kindtime.errors import InvalidCalendarDateError, InvalidFormatError, TicksOutOfRangeError

if TYPE_CHECKING:
    from kindtime.core.datetime import DateTime


_RFC2822_PATTERN = re.compile(
    r"^(?:([A-Za-z]{3})\s*,\s*)?"  # Optional day of week
    r"(\d{1,2})\s+([A-Za-z]{3})\s+(\d{2,4})\s+"  # Date: D Mon YYYY
    r"(\d{2}):(\d{2})(?::(\d{2}))?\s+"  # Time: HH:MM[:SS]
    r"([+-]\d{4}|[A-Za-z]{1,3})$"  # Zone
)

_MONTHS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")

# Sunday is 0, matching ordinal_to_day_of_week.
_WEEKDAYS = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")

_ZONE_OFFSETS = {
    "ut": 0,
    "gmt": 0,
    "z": 0,
    "est": -5 * 60,
    "edt": -4 * 60,
    "cst": -6 * 60,
    "cdt": -5 * 60,
    "mst": -7 * 60,
    "mdt": -6 * 60,
    "pst": -8 * 60,
    "pdt": -7 * 60,
}


def _parse_year(text: str) -> int:
    year = int(text)
    if len(text) == 2:
        return year + (2000 if year < 50 else 1900)
    if len(text) == 3:
        return year + 1900
    return year


def _parse_zone(text: str) -> int:
    """Return the offset in minutes east of UTC."""
    if text[0] in "+-":
        hours = int(text[1:3])
        minutes = int(text[3:5])
        if hours > 23 or minutes > 59:
            raise InvalidFormatError(f"offset out of range: {text!r}")
        total = hours * 60 + minutes
        return -total if text[0] == "-" else total

    offset = _ZONE_OFFSETS.get(text.lower())
    if offset is None:
        raise InvalidFormatError(f"unknown zone name: {text!r}")
    return offset


def parse_rfc2822(s: str) -> DateTime:
    """Parse an RFC 2822 date-time string.

    Args:
        s: The text to parse. Surrounding whitespace is ignored.

    Returns:
        An UNSPECIFIED DateTime holding the UTC instant.

    Raises:
        InvalidFormatError: If the text does not match the layout, names an
            unknown month or zone, has a mismatched day of week, or its
            fields are out of range.

    Examples:
        >>> parse_rfc2822("5 Mar 2024 12:15 +0200").hour
        10

        >>> parse_rfc2822("Mon, 5 Mar 2024 10:15:30 +0000")
        Traceback (most recent call last):
        ...
        InvalidFormatError: day of week 'Mon' does not match 2024-03-05
    """
    from kindtime.core.datetime import DateTime

    s = s.strip()
    if not s:
        raise InvalidFormatError("empty string")

    match = _RFC2822_PATTERN.match(s)
    if not match:
        raise InvalidFormatError(
            f"Invalid RFC 2822 format: {s!r}. "
            "Expected [Ddd, ]D Mon YYYY HH:MM[:SS] +HHMM"
        )

    weekday_str = match.group(1)
    day = int(match.group(2))
    month_str = match.group(3).lower()
    if month_str not in _MONTHS:
        raise InvalidFormatError(f"unknown month name: {match.group(3)!r}")
    month = _MONTHS.index(month_str) + 1
    year = _parse_year(match.group(4))
    hour = int(match.group(5))
    minute = int(match.group(6))
    second = int(match.group(7) or 0)
    offset = _parse_zone(match.group(8))

    try:
        result = DateTime._from_wall_fields(year, month, day, hour, minute, second, 0, offset)
    except (InvalidCalendarDateError, TicksOutOfRangeError) as e:
        raise InvalidFormatError(f"Invalid RFC 2822 value {s!r}: {e}") from e

    if weekday_str is not None:
        weekday = weekday_str.lower()
        if weekday not in _WEEKDAYS:
            raise InvalidFormatError(f"unknown day of week: {weekday_str!r}")
        actual = ordinal_to_day_of_week(ymd_to_ordinal(year, month, day))
        if _WEEKDAYS.index(weekday) != actual:
            raise InvalidFormatError(
                f"day of week {weekday_str!r} does not match "
                f"{year:04d}-{month:02d}-{day:02d}"
            )

    return result


__all__ = ["parse_rfc2822"]
