"""Time class representing a time of day.

This module provides the Time class, a time-of-day value with tick
(100 nanosecond) precision. A Time is combined with a Date to assemble a
DateTime.
"""

from __future__ import annotations

from kindtime._internal.constants import (
    NANOS_PER_TICK,
    TICKS_PER_DAY,
    TICKS_PER_HOUR,
    TICKS_PER_MICROSECOND,
    TICKS_PER_MILLISECOND,
    TICKS_PER_MINUTE,
    TICKS_PER_SECOND,
)
from kindtime._internal.validation import validate_range
from kindtime.errors import InvalidCalendarDateError


class Time:
    """A time of day with tick precision.

    Time represents the time portion of a day, from midnight (00:00:00)
    to just before the next midnight (23:59:59.9999999). It carries no
    date or kind information.

    The internal representation stores the ticks since midnight in a
    single ``_ticks`` slot.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        millisecond: The millisecond component (0-999).
        microsecond: The microsecond within the millisecond (0-999).
        nanosecond: The sub-second part in nanoseconds.

    Examples:
        >>> t = Time(14, 30, 45)
        >>> t.hour
        14

        >>> Time(12, 0, 0, millisecond=123, microsecond=456).ticks_since_midnight
        432001234560
    """

    __slots__ = ("_ticks",)

    @validate_range(
        hour=(0, 23),
        minute=(0, 59),
        second=(0, 59),
        millisecond=(0, 999),
        microsecond=(0, 999),
    )
    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        microsecond: int = 0,
    ) -> None:
        """Create a Time from component parts.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            millisecond: The millisecond (0-999).
            microsecond: The microsecond within the millisecond (0-999).

        Raises:
            InvalidCalendarDateError: If any component is out of range.

        Examples:
            >>> Time(25, 0, 0)
            Traceback (most recent call last):
            ...
            InvalidCalendarDateError: hour must be between 0 and 23, got 25
        """
        self._ticks: int = (
            hour * TICKS_PER_HOUR
            + minute * TICKS_PER_MINUTE
            + second * TICKS_PER_SECOND
            + millisecond * TICKS_PER_MILLISECOND
            + microsecond * TICKS_PER_MICROSECOND
        )

    @classmethod
    def from_ticks(cls, ticks: int) -> Time:
        """Create a Time from ticks since midnight.

        Args:
            ticks: Ticks since midnight, in [0, TICKS_PER_DAY).

        Raises:
            InvalidCalendarDateError: If ticks is outside a single day.
        """
        if ticks < 0 or ticks >= TICKS_PER_DAY:
            raise InvalidCalendarDateError(
                f"ticks since midnight must be between 0 and {TICKS_PER_DAY - 1}, got {ticks}"
            )
        instance = object.__new__(cls)
        instance._ticks = ticks
        return instance

    @classmethod
    def midnight(cls) -> Time:
        """Return a Time representing midnight (00:00:00)."""
        return cls.from_ticks(0)

    @property
    def hour(self) -> int:
        return self._ticks // TICKS_PER_HOUR

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
        """Return the microsecond within the millisecond (0-999)."""
        return (self._ticks % TICKS_PER_MILLISECOND) // TICKS_PER_MICROSECOND

    @property
    def nanosecond(self) -> int:
        """Return the sub-second part in nanoseconds (0-999999900)."""
        return (self._ticks % TICKS_PER_SECOND) * NANOS_PER_TICK

    @property
    def ticks_since_midnight(self) -> int:
        return self._ticks

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._ticks == other._ticks

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._ticks < other._ticks

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._ticks <= other._ticks

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._ticks > other._ticks

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._ticks >= other._ticks

    def __hash__(self) -> int:
        return hash(self._ticks)

    def __repr__(self) -> str:
        return (
            f"Time({self.hour}, {self.minute}, {self.second}, "
            f"ticks={self._ticks % TICKS_PER_SECOND})"
        )

    def __str__(self) -> str:
        """Return HH:MM:SS with a seven digit fraction when non-zero."""
        result = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        fraction = self._ticks % TICKS_PER_SECOND
        if fraction:
            result += f".{fraction:07d}"
        return result


__all__ = ["Time"]
