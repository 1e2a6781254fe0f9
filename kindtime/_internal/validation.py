"""Validation utilities for kindtime.

This module provides validation decorators and utilities for ensuring
calendar fields and tick counts are within valid ranges.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, ParamSpec, TypeVar

from kindtime._internal.constants import MAX_TICKS, MAX_YEAR, MIN_TICKS, MIN_YEAR
from kindtime.errors import InvalidCalendarDateError, TicksOutOfRangeError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    This decorator validates named parameters against specified (min, max)
    ranges, raising InvalidCalendarDateError if any value is out of range.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.
                  Both min and max are inclusive.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(hour=(0, 23))
        ... def at(hour: int) -> None:
        ...     pass

        >>> at(25)
        Traceback (most recent call last):
        ...
        InvalidCalendarDateError: hour must be between 0 and 23, got 25
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            for param_name, (min_val, max_val) in limits.items():
                value = bound.arguments.get(param_name)
                if value is not None and (value < min_val or value > max_val):
                    raise InvalidCalendarDateError(
                        f"{param_name} must be between {min_val} and {max_val}, "
                        f"got {value}"
                    )

            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Args:
        year: The year to validate.

    Raises:
        InvalidCalendarDateError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidCalendarDateError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Args:
        month: The month to validate.

    Raises:
        InvalidCalendarDateError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise InvalidCalendarDateError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        InvalidCalendarDateError: If day is invalid for the month.
    """
    from kindtime._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidCalendarDateError(
            f"day must be between 1 and {max_day} for {year:04d}-{month:02d}, got {day}"
        )


def validate_ticks(ticks: int) -> None:
    """Validate that a naive tick count is representable.

    Args:
        ticks: Ticks since 0001-01-01T00:00:00.

    Raises:
        TicksOutOfRangeError: If ticks is outside [MIN_TICKS, MAX_TICKS].
    """
    if ticks < MIN_TICKS or ticks > MAX_TICKS:
        raise TicksOutOfRangeError(
            f"ticks must be between {MIN_TICKS} and {MAX_TICKS}, got {ticks}"
        )


__all__ = [
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_ticks",
]
