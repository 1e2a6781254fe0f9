"""Date class representing a calendar date.

This module provides the Date class, a date-only value in the proleptic
Gregorian calendar between year 1 and year 9999. A Date is combined with
a Time to assemble a DateTime.
"""

from __future__ import annotations

from kindtime._internal.calendar import (
    day_of_year,
    ordinal_to_day_of_week,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from kindtime._internal.constants import DAYS_TO_YEAR_10000
from kindtime._internal.validation import (
    validate_day,
    validate_month,
    validate_year,
)
from kindtime.errors import InvalidCalendarDateError


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Internal representation is the ordinal day number, where 0001-01-01
    is day 1.

    Attributes:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.year
        2024
        >>> d.day_number
        738900

        >>> Date(2024, 2, 29)  # Valid leap year date
        Date(2024, 2, 29)
    """

    __slots__ = ("_ordinal",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day of the month.

        Raises:
            InvalidCalendarDateError: If any component is out of range.

        Examples:
            >>> Date(2023, 2, 29)
            Traceback (most recent call last):
            ...
            InvalidCalendarDateError: day must be between 1 and 28 for 2023-02, got 29
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._ordinal: int = ymd_to_ordinal(year, month, day)

    @classmethod
    def from_day_number(cls, day_number: int) -> Date:
        """Create a Date from an ordinal day number.

        Args:
            day_number: The ordinal day (1 = 0001-01-01).

        Returns:
            The corresponding Date.

        Raises:
            InvalidCalendarDateError: If the day number is out of range.

        Examples:
            >>> Date.from_day_number(1)
            Date(1, 1, 1)
        """
        if day_number < 1 or day_number > DAYS_TO_YEAR_10000:
            raise InvalidCalendarDateError(
                f"day number must be between 1 and {DAYS_TO_YEAR_10000}, got {day_number}"
            )
        instance = object.__new__(cls)
        instance._ordinal = day_number
        return instance

    @property
    def year(self) -> int:
        year, _, _ = ordinal_to_ymd(self._ordinal)
        return year

    @property
    def month(self) -> int:
        _, month, _ = ordinal_to_ymd(self._ordinal)
        return month

    @property
    def day(self) -> int:
        _, _, day = ordinal_to_ymd(self._ordinal)
        return day

    @property
    def day_number(self) -> int:
        """Return the ordinal day number (0001-01-01 is day 1)."""
        return self._ordinal

    @property
    def day_of_week(self) -> int:
        """Return the day of the week, Sunday as 0 through Saturday as 6.

        Examples:
            >>> Date(2024, 1, 14).day_of_week  # Sunday
            0
            >>> Date(2024, 1, 15).day_of_week  # Monday
            1
        """
        return ordinal_to_day_of_week(self._ordinal)

    @property
    def day_of_year(self) -> int:
        """Return the 1-based day of the year.

        Examples:
            >>> Date(2024, 12, 31).day_of_year  # Leap year
            366
        """
        return day_of_year(*ordinal_to_ymd(self._ordinal))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ordinal == other._ordinal

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ordinal < other._ordinal

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ordinal <= other._ordinal

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ordinal > other._ordinal

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ordinal >= other._ordinal

    def __hash__(self) -> int:
        return hash(self._ordinal)

    def __repr__(self) -> str:
        year, month, day = ordinal_to_ymd(self._ordinal)
        return f"Date({year}, {month}, {day})"

    def __str__(self) -> str:
        """Return the date as YYYY-MM-DD.

        Examples:
            >>> str(Date(2024, 1, 15))
            '2024-01-15'
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        return f"{year:04d}-{month:02d}-{day:02d}"


__all__ = ["Date"]
