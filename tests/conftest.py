"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from utc_clock.kernel.time import Clock
from utc_clock.testing.fixtures import fixed_clock, real_clock  # noqa: F401


@pytest.fixture(autouse=True)
def _default_clock() -> Iterator[None]:
    """Every test starts and ends on the real clock."""
    Clock.restore_default_clock()
    yield
    Clock.restore_default_clock()
