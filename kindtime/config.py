"""Ambient configuration: which HostClock DateTime consults.

Settings are loaded with pydantic-settings from ``KINDTIME_``-prefixed
environment variables. The clock is created lazily on first use. By
default it is a SystemClock; setting ``KINDTIME_LOCAL_OFFSET_MINUTES`` to
an integer selects a FixedOffsetClock with that offset instead, which is
useful for pinning LOCAL conversions in batch jobs and CI.

Examples:
    >>> from datetime import datetime
    >>> from kindtime.clock import FixedOffsetClock
    >>> with use_clock(FixedOffsetClock(60)):
    ...     get_clock().offset_for_utc(datetime(2024, 1, 1))
    60
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from pydantic import Field
from pydantic_settings import BaseSettings

from kindtime._internal.constants import MAX_OFFSET_MINUTES
from kindtime.clock import FixedOffsetClock, HostClock, SystemClock

logger = logging.getLogger(__name__)

LOCAL_OFFSET_ENV_VAR = "KINDTIME_LOCAL_OFFSET_MINUTES"

_clock: HostClock | None = None


class KindtimeSettings(BaseSettings):
    """Library settings, overridden by KINDTIME_* environment variables."""

    # Minutes east of UTC; None means ask the operating system
    local_offset_minutes: int | None = Field(
        default=None, ge=-MAX_OFFSET_MINUTES, le=MAX_OFFSET_MINUTES
    )

    model_config = {"env_prefix": "KINDTIME_", "env_ignore_empty": True}


def default_clock(settings: KindtimeSettings | None = None) -> HostClock:
    """Build the clock described by the settings.

    Args:
        settings: Settings to use; loaded from the environment when None.

    Returns:
        A FixedOffsetClock when a local offset is configured, otherwise a
        SystemClock.

    Raises:
        pydantic.ValidationError: If KINDTIME_LOCAL_OFFSET_MINUTES is not an
            integer or is outside UTC-14:00..UTC+14:00. It is a ValueError
            subclass.
    """
    if settings is None:
        settings = KindtimeSettings()

    offset = settings.local_offset_minutes
    if offset is None:
        logger.debug("using system clock")
        return SystemClock()

    logger.debug("using fixed local offset of %d minutes", offset)
    return FixedOffsetClock(offset)


def get_clock() -> HostClock:
    """Return the ambient HostClock, creating the default on first use."""
    global _clock
    if _clock is None:
        _clock = default_clock()
    return _clock


def set_clock(clock: HostClock | None) -> None:
    """Replace the ambient HostClock.

    Args:
        clock: The new clock, or None to rebuild the default on next use.
    """
    global _clock
    _clock = clock


@contextmanager
def use_clock(clock: HostClock) -> Iterator[HostClock]:
    """Temporarily install a HostClock, restoring the previous one on exit."""
    global _clock
    previous = _clock
    _clock = clock
    try:
        yield clock
    finally:
        _clock = previous


__all__ = [
    "LOCAL_OFFSET_ENV_VAR",
    "KindtimeSettings",
    "default_clock",
    "get_clock",
    "set_clock",
    "use_clock",
]
