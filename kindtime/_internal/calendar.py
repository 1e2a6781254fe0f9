"""Calendar utilities for kindtime.

This module provides internal functions for proleptic Gregorian calendar
calculations based on ordinal day numbers, where ordinal 1 is 0001-01-01.

Month lengths and leap years are derived from the ordinal arithmetic
itself: the length of a month is the distance between its first day and
the first day of the following month, and a leap year is one whose
February has 29 days.

This module is not part of the public API.
"""

from __future__ import annotations

import functools

from kindtime._internal.constants import DAYS_BEFORE_MONTH


def _days_before_year(year: int) -> int:
    """Return the number of days in the years before ``year``.

    Args:
        year: The year (1-based; year 1 has no days before it).

    Returns:
        Days from 0001-01-01 up to, but not including, January 1 of year.
    """
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def _has_leap_day(year: int) -> bool:
    # Only used to place months after February; the public leap-year
    # query goes through days_in_month.
    return _days_before_year(year + 1) - _days_before_year(year) == 366


def _days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month.

    Args:
        year: The year.
        month: The month (1-12).

    Returns:
        Number of days before the month in that year.
    """
    result = DAYS_BEFORE_MONTH[month]
    if month > 2 and _has_leap_day(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to an ordinal day number.

    The ordinal for 0001-01-01 is 1. No validation is performed, so the
    first day of year 10000 can be computed for range checks.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The ordinal day number.
    """
    return _days_before_year(year) + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal day number to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).
    """
    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)

    # 100-year cycles within the 400: each has 36524 days (except last which has 36525)
    n100, n = divmod(n, 36524)

    # 4-year cycles within the 100: each has 1461 days
    n4, n = divmod(n, 1461)

    # Years within the 4-year cycle: each has 365 days (except leap year)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year at the end of a cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert a 1-based day-of-year to month and day.

    Args:
        year: The year (for leap year placement).
        doy: Day of year (1-366).

    Returns:
        Tuple of (month, day).
    """
    month = 12
    while _days_before_month(year, month) >= doy:
        month -= 1
    return (month, doy - _days_before_month(year, month))


@functools.cache
def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    The length is measured as the distance between the first day of the
    month and the first day of the following month, rolling December
    over to January of the next year.

    Args:
        year: The year.
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.

    Examples:
        >>> days_in_month(2024, 2)
        29
        >>> days_in_month(2023, 12)
        31
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 12:
        next_year, next_month = year + 1, 1
    else:
        next_year, next_month = year, month + 1
    return ymd_to_ordinal(next_year, next_month, 1) - ymd_to_ordinal(year, month, 1)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Args:
        year: The year to check.

    Returns:
        True if February of that year has 29 days.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
    """
    return days_in_month(year, 2) == 29


def ordinal_to_day_of_week(ordinal: int) -> int:
    """Convert an ordinal day number to day of week (Sunday=0, Saturday=6).

    Args:
        ordinal: The ordinal day number.

    Returns:
        Day of week (0=Sunday, 6=Saturday).
    """
    # 0001-01-01 was a Monday
    return ordinal % 7


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based ordinal day within the year."""
    return _days_before_month(year, month) + day


__all__ = [
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "days_in_month",
    "is_leap_year",
    "ordinal_to_day_of_week",
    "day_of_year",
]
