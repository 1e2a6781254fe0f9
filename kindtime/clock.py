"""Host clock: the current instant and the local UTC offset.

A DateTime never reads the system time or zone on its own. Everything it
needs from the host goes through a HostClock:

    - utc_now: the current instant as a naive UTC ``datetime.datetime``
    - offset_for_utc: the local offset, in minutes, in effect at a UTC instant
    - offset_for_local: the local offset, in minutes, for a local wall time

Two implementations are provided. SystemClock asks the operating system
through the standard library ``time`` module. FixedOffsetClock applies a
constant offset and can freeze "now", which makes conversions
deterministic.

Examples:
    >>> from datetime import datetime
    >>> clock = FixedOffsetClock(120, now=datetime(2024, 3, 5, 10, 0))
    >>> clock.offset_for_utc(datetime(2024, 1, 1))
    120
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timedelta, timezone
from typing import Protocol, runtime_checkable

from kindtime._internal.constants import MAX_OFFSET_MINUTES, SECONDS_PER_MINUTE

logger = logging.getLogger(__name__)

_UNIX_EPOCH = datetime(1970, 1, 1)


@runtime_checkable
class HostClock(Protocol):
    """Port: the host wall clock and local offset source."""

    def utc_now(self) -> datetime:
        """Return the current instant as a naive UTC datetime."""
        ...

    def offset_for_utc(self, utc: datetime) -> int:
        """Return the local offset in minutes in effect at a naive UTC instant."""
        ...

    def offset_for_local(self, local: datetime) -> int:
        """Return the local offset in minutes that applies to a naive local time."""
        ...


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _shift(value: datetime, minutes: int) -> datetime:
    """Shift a naive datetime, pinning to the stdlib range at its edges."""
    try:
        return value + timedelta(minutes=minutes)
    except OverflowError:
        return datetime.max if minutes > 0 else datetime.min


class SystemClock:
    """Production clock backed by the operating system's local zone.

    Offsets are looked up with ``time.localtime``, so daylight saving
    transitions known to the host are honoured. Instants the platform
    cannot convert (far before 1970 on some systems, or beyond its time_t
    range) use the current offset.
    """

    def utc_now(self) -> datetime:
        return datetime.now(timezone.utc).replace(tzinfo=None)

    def offset_for_utc(self, utc: datetime) -> int:
        seconds = (utc - _UNIX_EPOCH).total_seconds()
        try:
            gmtoff = time.localtime(seconds).tm_gmtoff
        except (OverflowError, OSError, ValueError):
            logger.debug("host cannot resolve local offset at %s; using current offset", utc)
            gmtoff = time.localtime().tm_gmtoff
        return gmtoff // SECONDS_PER_MINUTE

    def offset_for_local(self, local: datetime) -> int:
        # Treat the wall time as UTC for a first guess, then look up the
        # offset at the instant that guess points to.
        guess = self.offset_for_utc(local)
        return self.offset_for_utc(_shift(local, -guess))

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedOffsetClock:
    """Clock with a constant local offset and an optional frozen "now".

    Args:
        offset_minutes: Local offset east of UTC, in minutes (-840..840).
        now: Instant returned by utc_now. Naive values are taken as UTC,
            aware values are converted to UTC. None reads the system time.

    Raises:
        ValueError: If the offset is outside UTC-14:00..UTC+14:00.

    Examples:
        >>> FixedOffsetClock(-300).offset_for_local(datetime(2024, 7, 1))
        -300
    """

    def __init__(self, offset_minutes: int, now: datetime | None = None) -> None:
        if abs(offset_minutes) > MAX_OFFSET_MINUTES:
            raise ValueError(
                f"offset_minutes must be between -{MAX_OFFSET_MINUTES} and "
                f"{MAX_OFFSET_MINUTES}, got {offset_minutes}"
            )
        self._offset_minutes = offset_minutes
        self._now = _to_naive_utc(now) if now is not None else None

    @property
    def offset_minutes(self) -> int:
        return self._offset_minutes

    def utc_now(self) -> datetime:
        if self._now is not None:
            return self._now
        return datetime.now(timezone.utc).replace(tzinfo=None)

    def offset_for_utc(self, utc: datetime) -> int:
        return self._offset_minutes

    def offset_for_local(self, local: datetime) -> int:
        return self._offset_minutes

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs.

        Raises:
            ValueError: If this clock is not frozen.
        """
        if self._now is None:
            raise ValueError("only a clock created with now= can be advanced")
        self._now += timedelta(**kwargs)

    def __repr__(self) -> str:
        return f"FixedOffsetClock({self._offset_minutes}, now={self._now!r})"


__all__ = ["HostClock", "SystemClock", "FixedOffsetClock"]
