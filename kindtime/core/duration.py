"""Duration class representing a span of time.

This module provides the Duration class for representing fixed-length
time spans with tick (100 nanosecond) precision. Duration is the unit of
all DateTime arithmetic below the month level.
"""

from __future__ import annotations

import math

from kindtime._internal.constants import (
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MICROSECOND,
    TICKS_PER_MILLISECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
)


def _scaled_ticks(value: int | float, ticks_per_unit: int) -> int:
    """Convert a number of units to a whole tick count.

    Integers scale exactly. Floats are rounded half away from zero to the
    nearest tick.

    Raises:
        ValueError: If value is NaN or infinite.
    """
    if isinstance(value, int):
        return value * ticks_per_unit
    if not math.isfinite(value):
        raise ValueError(f"duration value must be finite, got {value!r}")
    scaled = value * ticks_per_unit
    if scaled >= 0:
        return int(scaled + 0.5)
    return int(scaled - 0.5)


class Duration:
    """A signed span of time with tick precision.

    Duration stores a single exact integer count of 100 nanosecond ticks.
    It can be positive, negative, or zero. Component accessors follow the
    sign of the duration, so -1.5 hours has hours == -1 and
    minutes == -30.

    Attributes:
        ticks: The exact tick count.
        days: Whole days.
        hours: Hours component (-23..23).
        minutes: Minutes component (-59..59).
        seconds: Seconds component (-59..59).
        milliseconds: Milliseconds component (-999..999).

    Examples:
        >>> d = Duration(days=1, hours=1)
        >>> d.days
        1
        >>> d.hours
        1

        >>> Duration.from_hours(1.5).minutes
        30

        >>> (Duration(seconds=30) + Duration(seconds=45)).total_seconds
        75.0
    """

    __slots__ = ("_ticks",)

    def __init__(
        self,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        ticks: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        All parameters can be positive, negative, or zero and are summed.

        Args:
            days: Number of days.
            hours: Number of hours.
            minutes: Number of minutes.
            seconds: Number of seconds.
            milliseconds: Number of milliseconds.
            microseconds: Number of microseconds.
            ticks: Number of 100 nanosecond ticks.

        Examples:
            >>> Duration(hours=25)
            Duration(ticks=900000000000)

            >>> Duration(milliseconds=1500).total_seconds
            1.5
        """
        self._ticks: int = (
            days * TICKS_PER_DAY
            + hours * TICKS_PER_HOUR
            + minutes * TICKS_PER_MINUTE
            + seconds * TICKS_PER_SECOND
            + milliseconds * TICKS_PER_MILLISECOND
            + microseconds * TICKS_PER_MICROSECOND
            + ticks
        )

    @classmethod
    def zero(cls) -> Duration:
        """Create a zero-length duration.

        Examples:
            >>> Duration.zero().is_zero
            True
        """
        return cls()

    @classmethod
    def from_ticks(cls, ticks: int) -> Duration:
        """Create a Duration from an exact tick count.

        Args:
            ticks: Number of ticks (can be negative).

        Returns:
            A Duration of exactly that many ticks.
        """
        return cls(ticks=ticks)

    @classmethod
    def from_components(
        cls,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
    ) -> Duration:
        """Create a Duration from calendar-free components.

        Equivalent to the constructor without the raw ``ticks`` argument.
        """
        return cls(days, hours, minutes, seconds, milliseconds, microseconds)

    @classmethod
    def from_days(cls, days: int | float) -> Duration:
        """Create a Duration from a (possibly fractional) number of days.

        Args:
            days: Number of days. Fractions are rounded to the nearest tick.

        Returns:
            A Duration representing the specified number of days.

        Raises:
            ValueError: If days is NaN or infinite.

        Examples:
            >>> Duration.from_days(1.5).hours
            12
        """
        return cls(ticks=_scaled_ticks(days, TICKS_PER_DAY))

    @classmethod
    def from_hours(cls, hours: int | float) -> Duration:
        """Create a Duration from a (possibly fractional) number of hours."""
        return cls(ticks=_scaled_ticks(hours, TICKS_PER_HOUR))

    @classmethod
    def from_minutes(cls, minutes: int | float) -> Duration:
        """Create a Duration from a (possibly fractional) number of minutes."""
        return cls(ticks=_scaled_ticks(minutes, TICKS_PER_MINUTE))

    @classmethod
    def from_seconds(cls, seconds: int | float) -> Duration:
        """Create a Duration from a (possibly fractional) number of seconds.

        Examples:
            >>> Duration.from_seconds(0.25).milliseconds
            250
        """
        return cls(ticks=_scaled_ticks(seconds, TICKS_PER_SECOND))

    @classmethod
    def from_milliseconds(cls, milliseconds: int | float) -> Duration:
        """Create a Duration from a (possibly fractional) number of milliseconds."""
        return cls(ticks=_scaled_ticks(milliseconds, TICKS_PER_MILLISECOND))

    @classmethod
    def from_microseconds(cls, microseconds: int | float) -> Duration:
        """Create a Duration from a (possibly fractional) number of microseconds.

        Examples:
            >>> Duration.from_microseconds(1.5).ticks
            15
        """
        return cls(ticks=_scaled_ticks(microseconds, TICKS_PER_MICROSECOND))

    @property
    def ticks(self) -> int:
        """Return the exact signed tick count."""
        return self._ticks

    def _component(self, unit: int, modulus: int) -> int:
        # Truncate toward zero so components carry the duration's sign
        magnitude = (abs(self._ticks) // unit) % modulus
        return -magnitude if self._ticks < 0 else magnitude

    @property
    def days(self) -> int:
        """Return the whole days component (truncated toward zero)."""
        magnitude = abs(self._ticks) // TICKS_PER_DAY
        return -magnitude if self._ticks < 0 else magnitude

    @property
    def hours(self) -> int:
        """Return the hours component (-23..23)."""
        return self._component(TICKS_PER_HOUR, 24)

    @property
    def minutes(self) -> int:
        """Return the minutes component (-59..59)."""
        return self._component(TICKS_PER_MINUTE, 60)

    @property
    def seconds(self) -> int:
        """Return the seconds component (-59..59)."""
        return self._component(TICKS_PER_SECOND, 60)

    @property
    def milliseconds(self) -> int:
        """Return the milliseconds component (-999..999)."""
        return self._component(TICKS_PER_MILLISECOND, 1000)

    @property
    def total_days(self) -> float:
        """Return the duration in fractional days."""
        return self._ticks / TICKS_PER_DAY

    @property
    def total_hours(self) -> float:
        """Return the duration in fractional hours."""
        return self._ticks / TICKS_PER_HOUR

    @property
    def total_minutes(self) -> float:
        """Return the duration in fractional minutes."""
        return self._ticks / TICKS_PER_MINUTE

    @property
    def total_seconds(self) -> float:
        """Return the duration in fractional seconds.

        Note: Large durations may lose precision in the float result.
        For exact calculations, use ticks.

        Examples:
            >>> Duration(days=1, hours=1).total_seconds
            90000.0
        """
        return self._ticks / TICKS_PER_SECOND

    @property
    def total_milliseconds(self) -> float:
        """Return the duration in fractional milliseconds."""
        return self._ticks / TICKS_PER_MILLISECOND

    @property
    def is_negative(self) -> bool:
        """Return True if this is a negative duration."""
        return self._ticks < 0

    @property
    def is_zero(self) -> bool:
        """Return True if this is a zero-length duration."""
        return self._ticks == 0

    # Named arithmetic

    def add(self, other: Duration) -> Duration:
        """Return the sum of this duration and another."""
        return Duration(ticks=self._ticks + other._ticks)

    def subtract(self, other: Duration) -> Duration:
        """Return this duration minus another."""
        return Duration(ticks=self._ticks - other._ticks)

    def negate(self) -> Duration:
        """Return the duration with the opposite sign."""
        return Duration(ticks=-self._ticks)

    # Operators

    def __add__(self, other: object) -> Duration:
        """Add two durations.

        Examples:
            >>> Duration(seconds=30) + Duration(seconds=45)
            Duration(ticks=750000000)
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        """Subtract one duration from another."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> Duration:
        """Multiply a duration by an integer.

        Examples:
            >>> (Duration(seconds=30) * 3).total_seconds
            90.0
        """
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Duration(ticks=self._ticks * other)

    def __rmul__(self, other: object) -> Duration:
        """Support scalar * Duration."""
        return self.__mul__(other)

    def __neg__(self) -> Duration:
        return self.negate()

    def __pos__(self) -> Duration:
        return Duration(ticks=self._ticks)

    def __abs__(self) -> Duration:
        return Duration(ticks=abs(self._ticks))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ticks == other._ticks

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ticks < other._ticks

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ticks <= other._ticks

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ticks > other._ticks

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ticks >= other._ticks

    def __hash__(self) -> int:
        return hash(self._ticks)

    def __repr__(self) -> str:
        return f"Duration(ticks={self._ticks})"

    def __str__(self) -> str:
        """Return the constant "[-][d.]hh:mm:ss[.fffffff]" representation.

        Examples:
            >>> str(Duration(days=1, hours=2, minutes=30))
            '1.02:30:00'
            >>> str(Duration(ticks=-15))
            '-00:00:00.0000015'
        """
        sign = "-" if self._ticks < 0 else ""
        days, rest = divmod(abs(self._ticks), TICKS_PER_DAY)
        hours, rest = divmod(rest, TICKS_PER_HOUR)
        minutes, rest = divmod(rest, TICKS_PER_MINUTE)
        seconds, fraction = divmod(rest, TICKS_PER_SECOND)

        result = f"{hours:02d}:{minutes:02d}:{seconds:02d}"
        if days:
            result = f"{days}.{result}"
        if fraction:
            result += f".{fraction:07d}"
        return sign + result

    def __bool__(self) -> bool:
        """Return True if this is a non-zero duration."""
        return not self.is_zero


__all__ = ["Duration"]
