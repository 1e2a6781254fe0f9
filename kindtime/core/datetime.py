"""DateTime class: a naive calendar instant tagged with a kind.

This module provides the DateTime class. A DateTime stores a zone-less
calendar timestamp with tick (100 nanosecond) precision together with a
DateTimeKind tag that says how the timestamp is read when an absolute
instant is needed:

    - UTC and UNSPECIFIED are read as UTC
    - LOCAL is read through the host's local offset

Every comparison, hash and DateTime-to-DateTime subtraction goes through
one resolution step (``DateTime._resolve``) before the instants are
compared. Month and year arithmetic works on calendar fields and clamps
the day of month; arithmetic on days and smaller units adds a fixed
number of ticks.
"""

from __future__ import annotations

import logging
from datetime import datetime as _stdlib_datetime
from datetime import timedelta as _stdlib_timedelta
from typing import overload

from kindtime import config
from kindtime._internal import calendar
from kindtime._internal.constants import (
    MAX_TICKS,
    MAX_YEAR,
    MIN_TICKS,
    MIN_YEAR,
    NANOS_PER_TICK,
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MICROSECOND,
    TICKS_PER_MILLISECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
    UNIX_EPOCH_TICKS,
)
from kindtime._internal.validation import validate_month, validate_ticks, validate_year
from kindtime.core.date import Date
from kindtime.core.duration import Duration
from kindtime.core.time import Time
from kindtime.errors import InvalidFormatError, TicksOutOfRangeError
from kindtime.format import rfc2822, rfc3339
from kindtime.format.pattern import format_pattern
from kindtime.units.kind import DateTimeKind

logger = logging.getLogger(__name__)

_STDLIB_MIN = _stdlib_datetime(1, 1, 1)


def _ticks_from_stdlib(value: _stdlib_datetime) -> int:
    """Return the naive tick count of a naive stdlib datetime."""
    seconds = value.hour * 3600 + value.minute * 60 + value.second
    return (
        (value.toordinal() - 1) * TICKS_PER_DAY
        + seconds * TICKS_PER_SECOND
        + value.microsecond * TICKS_PER_MICROSECOND
    )


def _ticks_to_stdlib(ticks: int) -> _stdlib_datetime:
    """Return a naive stdlib datetime for a tick count (truncated to microseconds)."""
    return _STDLIB_MIN + _stdlib_timedelta(microseconds=ticks // TICKS_PER_MICROSECOND)


def _local_offset_ticks(local_ticks: int) -> int:
    """Offset, in ticks, that the host applies to a local wall time."""
    minutes = config.get_clock().offset_for_local(_ticks_to_stdlib(local_ticks))
    return minutes * TICKS_PER_MINUTE


def _utc_offset_ticks(utc_ticks: int) -> int:
    """Offset, in ticks, that the host applies at a UTC instant."""
    minutes = config.get_clock().offset_for_utc(_ticks_to_stdlib(utc_ticks))
    return minutes * TICKS_PER_MINUTE


class DateTime:
    """A naive calendar timestamp with a kind tag.

    DateTime values are immutable; every operation that changes the
    instant or the kind returns a new value. The valid range is
    0001-01-01T00:00:00 through 9999-12-31T23:59:59.9999999.

    Equality and ordering compare resolved instants, so UNSPECIFIED and
    UTC values with the same fields are equal, while a LOCAL value with
    the same fields is equal to them only when the host's local offset is
    zero.

    Attributes:
        year, month, day: Calendar date fields.
        hour, minute, second: Time of day fields.
        millisecond: Milliseconds within the second (0-999).
        microsecond: Microseconds within the second (0-999999).
        nanosecond: Nanoseconds within the second, a multiple of 100.
        kind: The DateTimeKind tag.

    Examples:
        >>> dt = DateTime(2024, 3, 5, 10, 15, 30)
        >>> dt.kind
        <DateTimeKind.UNSPECIFIED: 0>
        >>> dt.add_months(1).month
        4

        >>> DateTime(2023, 1, 31).add_months(1)
        DateTime(2023, 2, 28, 0, 0, 0, nanosecond=0, kind=UNSPECIFIED)

        >>> DateTime(2024, 1, 1, kind=DateTimeKind.UTC) == DateTime(2024, 1, 1)
        True
    """

    __slots__ = ("_ticks", "_kind")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        microsecond: int = 0,
        *,
        kind: DateTimeKind | int = DateTimeKind.UNSPECIFIED,
    ) -> None:
        """Create a DateTime from calendar fields.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            millisecond: The millisecond (0-999).
            microsecond: The microsecond within the millisecond (0-999).
            kind: The kind tag, a DateTimeKind or its integer value.

        Raises:
            InvalidCalendarDateError: If the fields do not name a real
                date and time.
            UnsupportedKindTagError: If kind is not a valid tag.

        Examples:
            >>> DateTime(2024, 2, 29).day
            29
            >>> DateTime(2023, 2, 29)
            Traceback (most recent call last):
            ...
            InvalidCalendarDateError: day must be between 1 and 28 for 2023-02, got 29
        """
        date = Date(year, month, day)
        time = Time(hour, minute, second, millisecond, microsecond)

        self._ticks: int = (date.day_number - 1) * TICKS_PER_DAY + time.ticks_since_midnight
        self._kind: DateTimeKind = DateTimeKind.coerce(kind)

    @classmethod
    def _from_internal(cls, ticks: int, kind: DateTimeKind) -> DateTime:
        """Create a DateTime from a naive tick count, bypassing validation."""
        instance = object.__new__(cls)
        instance._ticks = ticks
        instance._kind = kind
        return instance

    @classmethod
    def _checked(cls, ticks: int, kind: DateTimeKind) -> DateTime:
        """Create a DateTime from an arithmetic result.

        Raises:
            TicksOutOfRangeError: If ticks is not representable.
        """
        if ticks < MIN_TICKS or ticks > MAX_TICKS:
            raise TicksOutOfRangeError(
                "the resulting date/time is outside the range "
                "0001-01-01T00:00:00 to 9999-12-31T23:59:59.9999999"
            )
        return cls._from_internal(ticks, kind)

    # Factories

    @classmethod
    def from_ticks(
        cls,
        ticks: int,
        kind: DateTimeKind | int = DateTimeKind.UNSPECIFIED,
    ) -> DateTime:
        """Create a DateTime from ticks since 0001-01-01T00:00:00.

        Args:
            ticks: Number of 100 nanosecond ticks since the epoch.
            kind: The kind tag for the result.

        Returns:
            The corresponding DateTime.

        Raises:
            TicksOutOfRangeError: If ticks is negative or past max_value().

        Examples:
            >>> DateTime.from_ticks(0)
            DateTime(1, 1, 1, 0, 0, 0, nanosecond=0, kind=UNSPECIFIED)
        """
        validate_ticks(ticks)
        return cls._from_internal(ticks, DateTimeKind.coerce(kind))

    @classmethod
    def combine(
        cls,
        date: Date,
        time: Time,
        kind: DateTimeKind | int = DateTimeKind.UNSPECIFIED,
    ) -> DateTime:
        """Create a DateTime from a Date and a Time.

        Examples:
            >>> DateTime.combine(Date(2024, 1, 15), Time(14, 30, 45))
            DateTime(2024, 1, 15, 14, 30, 45, nanosecond=0, kind=UNSPECIFIED)
        """
        ticks = (date.day_number - 1) * TICKS_PER_DAY + time.ticks_since_midnight
        return cls._from_internal(ticks, DateTimeKind.coerce(kind))

    @classmethod
    def now(cls) -> DateTime:
        """Return the current host instant at the local offset, kind LOCAL."""
        clock = config.get_clock()
        utc = clock.utc_now()
        offset = clock.offset_for_utc(utc) * TICKS_PER_MINUTE
        return cls._checked(_ticks_from_stdlib(utc) + offset, DateTimeKind.LOCAL)

    @classmethod
    def utc_now(cls) -> DateTime:
        """Return the current host instant in UTC, kind UTC."""
        utc = config.get_clock().utc_now()
        return cls._from_internal(_ticks_from_stdlib(utc), DateTimeKind.UTC)

    @classmethod
    def today(cls) -> DateTime:
        """Return the current UTC date at midnight, kind LOCAL.

        The date comes from the UTC clock, but the value is tagged LOCAL
        as the replicated platform does.
        """
        utc_ticks = _ticks_from_stdlib(config.get_clock().utc_now())
        return cls._from_internal(utc_ticks - utc_ticks % TICKS_PER_DAY, DateTimeKind.LOCAL)

    @classmethod
    def min_value(cls) -> DateTime:
        """Return 0001-01-01T00:00:00, kind UTC."""
        return cls._from_internal(MIN_TICKS, DateTimeKind.UTC)

    @classmethod
    def max_value(cls) -> DateTime:
        """Return one tick before 10000-01-01T00:00:00, kind UTC."""
        return cls._from_internal(MAX_TICKS, DateTimeKind.UTC)

    @classmethod
    def unix_epoch(cls) -> DateTime:
        """Return 1970-01-01T00:00:00, kind UTC."""
        return cls._from_internal(UNIX_EPOCH_TICKS, DateTimeKind.UTC)

    @classmethod
    def from_unix_milliseconds(cls, milliseconds: int) -> DateTime:
        """Create a UTC DateTime from milliseconds since the Unix epoch.

        Raises:
            TicksOutOfRangeError: If the result is not representable.

        Examples:
            >>> DateTime.from_unix_milliseconds(86_400_000).day
            2
        """
        return cls._checked(
            UNIX_EPOCH_TICKS + milliseconds * TICKS_PER_MILLISECOND, DateTimeKind.UTC
        )

    @classmethod
    def _from_wall_fields(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        fraction_ticks: int,
        offset_minutes: int,
    ) -> DateTime:
        """Build an UNSPECIFIED value from wall fields at a UTC offset.

        The wall time is normalized to UTC by subtracting the offset.

        Raises:
            InvalidCalendarDateError: If the fields do not name a real date.
            TicksOutOfRangeError: If the UTC instant is not representable.
        """
        wall = cls(year, month, day, hour, minute, second)
        ticks = wall._ticks + fraction_ticks - offset_minutes * TICKS_PER_MINUTE
        return cls._checked(ticks, DateTimeKind.UNSPECIFIED)

    # Calendar helpers

    @staticmethod
    def days_in_month(year: int, month: int) -> int:
        """Return the number of days in a month.

        Raises:
            InvalidCalendarDateError: If year or month is out of range.

        Examples:
            >>> DateTime.days_in_month(2024, 2)
            29
            >>> DateTime.days_in_month(2023, 12)
            31
        """
        validate_year(year)
        validate_month(month)
        return calendar.days_in_month(year, month)

    @staticmethod
    def is_leap_year(year: int) -> bool:
        """Return True if February of ``year`` has 29 days.

        Raises:
            InvalidCalendarDateError: If year is out of range.
        """
        validate_year(year)
        return calendar.is_leap_year(year)

    # Properties - date components

    @property
    def _ymd(self) -> tuple[int, int, int]:
        return calendar.ordinal_to_ymd(self.day_number)

    @property
    def year(self) -> int:
        return self._ymd[0]

    @property
    def month(self) -> int:
        return self._ymd[1]

    @property
    def day(self) -> int:
        return self._ymd[2]

    @property
    def day_number(self) -> int:
        """Return the ordinal day number, where 0001-01-01 is day 1."""
        return self._ticks // TICKS_PER_DAY + 1

    @property
    def day_of_week(self) -> int:
        """Return the day of the week, Sunday as 0 through Saturday as 6.

        Examples:
            >>> DateTime(2024, 3, 5).day_of_week  # Tuesday
            2
        """
        return calendar.ordinal_to_day_of_week(self.day_number)

    @property
    def day_of_year(self) -> int:
        """Return the 1-based day of the year (1-366)."""
        return calendar.day_of_year(*self._ymd)

    # Properties - time components

    @property
    def hour(self) -> int:
        return (self._ticks % TICKS_PER_DAY) // TICKS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._ticks % TICKS_PER_HOUR) // TICKS_PER_MINUTE

    @property
    def second(self) -> int:
        return (self._ticks % TICKS_PER_MINUTE) // TICKS_PER_SECOND

    @property
    def millisecond(self) -> int:
        return (self._ticks % TICKS_PER_SECOND) // TICKS_PER_MILLISECOND

    @property
    def microsecond(self) -> int:
        """Return the microseconds within the second (0-999999)."""
        return (self._ticks % TICKS_PER_SECOND) // TICKS_PER_MICROSECOND

    @property
    def nanosecond(self) -> int:
        """Return the nanoseconds within the second, always a multiple of 100."""
        return (self._ticks % TICKS_PER_SECOND) * NANOS_PER_TICK

    @property
    def time_of_day(self) -> Duration:
        """Return the time elapsed since midnight of the same naive day."""
        return Duration(ticks=self._ticks % TICKS_PER_DAY)

    @property
    def kind(self) -> DateTimeKind:
        return self._kind

    @property
    def date(self) -> DateTime:
        """Return this value at midnight, keeping the kind.

        Examples:
            >>> DateTime(2024, 3, 5, 10, 15, 30).date
            DateTime(2024, 3, 5, 0, 0, 0, nanosecond=0, kind=UNSPECIFIED)
        """
        return DateTime._from_internal(self._ticks - self._ticks % TICKS_PER_DAY, self._kind)

    def to_date(self) -> Date:
        """Return the date part as a Date."""
        return Date.from_day_number(self.day_number)

    def to_time(self) -> Time:
        """Return the time-of-day part as a Time."""
        return Time.from_ticks(self._ticks % TICKS_PER_DAY)

    # Kind resolution and conversion

    def _resolve(self) -> int:
        """Return the absolute instant as UTC ticks.

        UTC and UNSPECIFIED are read with offset zero; LOCAL subtracts
        the host offset that applies to its wall time. All comparisons,
        hashing, ``ticks`` and DateTime subtraction use this.
        """
        if self._kind is DateTimeKind.LOCAL:
            return self._ticks - _local_offset_ticks(self._ticks)
        return self._ticks

    @property
    def ticks(self) -> int:
        """Return the resolved instant in ticks since min_value().

        Examples:
            >>> DateTime.min_value().ticks
            0
        """
        return self._resolve()

    def specify_kind(self, kind: DateTimeKind | int) -> DateTime:
        """Return the same naive instant under a different kind tag.

        No conversion is performed; only the tag changes.

        Raises:
            UnsupportedKindTagError: If kind is not a valid tag.
        """
        return DateTime._from_internal(self._ticks, DateTimeKind.coerce(kind))

    def to_universal_time(self) -> DateTime:
        """Convert to UTC.

        UTC values are returned unchanged. LOCAL and UNSPECIFIED values
        are both read as local wall time and converted. The result kind
        is always UTC.

        Raises:
            TicksOutOfRangeError: If the converted instant is not representable.

        Examples:
            >>> from kindtime.clock import FixedOffsetClock
            >>> from kindtime.config import use_clock
            >>> with use_clock(FixedOffsetClock(120)):
            ...     DateTime(2024, 3, 5, 12, kind=DateTimeKind.LOCAL).to_universal_time().hour
            10
        """
        if self._kind is DateTimeKind.UTC:
            return self
        ticks = self._ticks - _local_offset_ticks(self._ticks)
        return DateTime._checked(ticks, DateTimeKind.UTC)

    def to_local_time(self) -> DateTime:
        """Convert to local time.

        LOCAL values are returned unchanged. UTC and UNSPECIFIED values
        are both read as UTC and converted. The result kind is always
        LOCAL.

        UNSPECIFIED is read as local by to_universal_time but as UTC here;
        the asymmetry matches the platform this type replicates.

        Raises:
            TicksOutOfRangeError: If the converted instant is not representable.
        """
        if self._kind is DateTimeKind.LOCAL:
            return self
        ticks = self._ticks + _utc_offset_ticks(self._ticks)
        return DateTime._checked(ticks, DateTimeKind.LOCAL)

    @property
    def local_date_time(self) -> DateTime:
        """Alias for to_local_time()."""
        return self.to_local_time()

    @property
    def utc_date_time(self) -> DateTime:
        """Alias for to_universal_time()."""
        return self.to_universal_time()

    def to_unix_milliseconds(self) -> int:
        """Return milliseconds since the Unix epoch of the resolved instant."""
        return (self._resolve() - UNIX_EPOCH_TICKS) // TICKS_PER_MILLISECOND

    # Calendar arithmetic

    def add_months(self, months: int) -> DateTime:
        """Return a new DateTime shifted by a number of calendar months.

        The day of month is clamped to the last day of the destination
        month when it does not exist there. Time of day and kind are kept.

        Args:
            months: Number of months to add (can be negative).

        Raises:
            TicksOutOfRangeError: If the result is outside years 1-9999.

        Examples:
            >>> DateTime(2024, 1, 31).add_months(1).day
            29
            >>> DateTime(2024, 3, 15).add_months(-3).year
            2023
        """
        year, month, day = self._ymd
        total_months = year * 12 + (month - 1) + months
        new_year, new_month = divmod(total_months, 12)
        new_month += 1

        if new_year < MIN_YEAR or new_year > MAX_YEAR:
            raise TicksOutOfRangeError(
                f"adding {months} months to {year:04d}-{month:02d} leaves years "
                f"{MIN_YEAR}-{MAX_YEAR}"
            )

        new_day = min(day, calendar.days_in_month(new_year, new_month))
        ordinal = calendar.ymd_to_ordinal(new_year, new_month, new_day)
        ticks = (ordinal - 1) * TICKS_PER_DAY + self._ticks % TICKS_PER_DAY
        return DateTime._from_internal(ticks, self._kind)

    def add_years(self, years: int) -> DateTime:
        """Return a new DateTime shifted by a number of calendar years.

        Defined as add_months(years * 12), so Feb 29 clamps to Feb 28.

        Examples:
            >>> DateTime(2024, 2, 29).add_years(1).day
            28
        """
        return self.add_months(years * 12)

    # Duration arithmetic

    def add(self, duration: Duration) -> DateTime:
        """Return a new DateTime shifted by an exact duration.

        Raises:
            TicksOutOfRangeError: If the result is not representable.
        """
        return DateTime._checked(self._ticks + duration.ticks, self._kind)

    def add_days(self, days: int | float) -> DateTime:
        """Add a (possibly fractional) number of 24-hour days."""
        return self.add(Duration.from_days(days))

    def add_hours(self, hours: int | float) -> DateTime:
        return self.add(Duration.from_hours(hours))

    def add_minutes(self, minutes: int | float) -> DateTime:
        return self.add(Duration.from_minutes(minutes))

    def add_seconds(self, seconds: int | float) -> DateTime:
        return self.add(Duration.from_seconds(seconds))

    def add_milliseconds(self, milliseconds: int | float) -> DateTime:
        return self.add(Duration.from_milliseconds(milliseconds))

    def add_microseconds(self, microseconds: int | float) -> DateTime:
        return self.add(Duration.from_microseconds(microseconds))

    def add_ticks(self, ticks: int) -> DateTime:
        """Add an exact number of ticks.

        Examples:
            >>> DateTime.max_value().add_ticks(1)
            Traceback (most recent call last):
            ...
            TicksOutOfRangeError: the resulting date/time is outside the range ...
        """
        return self.add(Duration.from_ticks(ticks))

    @overload
    def subtract(self, other: Duration) -> DateTime: ...

    @overload
    def subtract(self, other: DateTime) -> Duration: ...

    def subtract(self, other: Duration | DateTime) -> DateTime | Duration:
        """Subtract a Duration or another DateTime.

        Subtracting a Duration shifts the naive instant back and keeps the
        kind. Subtracting a DateTime resolves both operands to absolute
        instants and returns their exact difference.

        Raises:
            TicksOutOfRangeError: If a shifted result is not representable.
            TypeError: If other is neither a Duration nor a DateTime.

        Examples:
            >>> a = DateTime(2024, 3, 5, 12)
            >>> str(a.subtract(DateTime(2024, 3, 4, 6)))
            '1.06:00:00'
        """
        if isinstance(other, Duration):
            return DateTime._checked(self._ticks - other.ticks, self._kind)
        if isinstance(other, DateTime):
            return Duration(ticks=self._resolve() - other._resolve())
        raise TypeError(
            f"can only subtract Duration or DateTime, got {type(other).__name__}"
        )

    def __add__(self, other: object) -> DateTime:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    @overload
    def __sub__(self, other: Duration) -> DateTime: ...

    @overload
    def __sub__(self, other: DateTime) -> Duration: ...

    def __sub__(self, other: object) -> DateTime | Duration:
        if not isinstance(other, (Duration, DateTime)):
            return NotImplemented
        return self.subtract(other)

    # Comparison

    def compare_to(self, other: DateTime) -> int:
        """Return -1, 0 or 1 comparing resolved instants.

        Examples:
            >>> DateTime(2024, 1, 1).compare_to(DateTime(2024, 1, 2))
            -1
        """
        a = self._resolve()
        b = other._resolve()
        return (a > b) - (a < b)

    @staticmethod
    def compare(x: DateTime, y: DateTime) -> int:
        """Return -1, 0 or 1 comparing the resolved instants of x and y."""
        return x.compare_to(y)

    def equals(self, other: DateTime) -> bool:
        """Return True if both values resolve to the same instant."""
        return self.compare_to(other) == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._resolve() == other._resolve()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._resolve() < other._resolve()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._resolve() <= other._resolve()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._resolve() > other._resolve()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._resolve() >= other._resolve()

    def __hash__(self) -> int:
        return hash(self._resolve())

    # Parsing and formatting

    @classmethod
    def parse(cls, text: str) -> DateTime:
        """Parse an RFC 3339 or RFC 2822 date-time string.

        RFC 3339 is tried first, then RFC 2822. The parsed instant is
        normalized to UTC using its offset, and the result kind is always
        UNSPECIFIED.

        Raises:
            InvalidFormatError: If neither layout parses.
            TypeError: If text is not a string.

        Examples:
            >>> DateTime.parse("2024-03-05T10:15:30Z")
            DateTime(2024, 3, 5, 10, 15, 30, nanosecond=0, kind=UNSPECIFIED)
            >>> DateTime.parse("Tue, 5 Mar 2024 12:15:30 +0200").hour
            10
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")

        try:
            return rfc3339.parse_rfc3339(text)
        except InvalidFormatError as exc:
            logger.debug("not RFC 3339: %s", exc)

        try:
            return rfc2822.parse_rfc2822(text)
        except InvalidFormatError as exc:
            logger.debug("not RFC 2822: %s", exc)

        raise InvalidFormatError(f"Input string was not in a correct format: {text!r}")

    @classmethod
    def try_parse(cls, text: str) -> DateTime | None:
        """Parse like parse(), returning None instead of raising.

        Examples:
            >>> DateTime.try_parse("yesterday") is None
            True
        """
        try:
            return cls.parse(text)
        except InvalidFormatError:
            return None

    def to_string(self, pattern: str | None = None) -> str:
        """Format with a calendar pattern such as ``yyyy-MM-dd hh:mm:ss``.

        Without a pattern, returns str(self). See kindtime.format.pattern
        for the token table.

        Raises:
            ValueError: If the rewritten pattern holds an unsupported
                %-directive.

        Examples:
            >>> DateTime(2024, 3, 5, 10, 15, 30, 250).to_string("dd/MM/yyyy hh:mm:ss.fff")
            '05/03/2024 10:15:30.250'
        """
        if pattern is None:
            return str(self)
        return format_pattern(self, pattern)

    def __repr__(self) -> str:
        year, month, day = self._ymd
        return (
            f"DateTime({year}, {month}, {day}, {self.hour}, {self.minute}, "
            f"{self.second}, nanosecond={self.nanosecond}, kind={self._kind.name})"
        )

    def __str__(self) -> str:
        """Return ``YYYY-MM-DD HH:MM:SS`` plus any non-zero fraction.

        Examples:
            >>> str(DateTime(2024, 3, 5, 10, 15, 30, 500))
            '2024-03-05 10:15:30.5'
        """
        year, month, day = self._ymd
        result = (
            f"{year:04d}-{month:02d}-{day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )
        fraction = self._ticks % TICKS_PER_SECOND
        if fraction:
            result += f".{fraction:07d}".rstrip("0")
        return result

    def __bool__(self) -> bool:
        """DateTimes are always truthy."""
        return True


__all__ = ["DateTime"]
