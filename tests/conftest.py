"""Pytest configuration and fixtures for kindtime tests."""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from typing import Iterator

import pytest

# Add the parent directory to sys.path so kindtime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from kindtime import config  # noqa: E402
from kindtime.clock import FixedOffsetClock  # noqa: E402

FROZEN_NOW = datetime(2024, 3, 5, 10, 15, 30, 250_000)


@pytest.fixture(autouse=True)
def _restore_clock() -> Iterator[None]:
    """Reset the ambient clock after every test."""
    yield
    config.set_clock(None)


@pytest.fixture
def utc_clock() -> Iterator[FixedOffsetClock]:
    """A frozen clock whose local offset is zero."""
    with config.use_clock(FixedOffsetClock(0, now=FROZEN_NOW)) as clock:
        yield clock


@pytest.fixture
def plus_two_clock() -> Iterator[FixedOffsetClock]:
    """A frozen clock two hours east of UTC."""
    with config.use_clock(FixedOffsetClock(120, now=FROZEN_NOW)) as clock:
        yield clock


@pytest.fixture
def minus_five_clock() -> Iterator[FixedOffsetClock]:
    """A frozen clock five hours west of UTC."""
    with config.use_clock(FixedOffsetClock(-300, now=FROZEN_NOW)) as clock:
        yield clock
