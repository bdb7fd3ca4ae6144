"""Kernel time – ClockStrategy protocol."""
from __future__ import annotations

from datetime import date, datetime
from typing import Protocol, runtime_checkable

from utc_clock.kernel.time.units import TemporalAmount, TimeUnit


@runtime_checkable
class ClockStrategy(Protocol):
    """Port: a source of the current time.

    ``now()`` is an aware UTC instant, ``now_datetime()`` the naive UTC
    date-time and ``today()`` the UTC calendar date.  Reads never mutate.

    ``advance_by``/``reverse_by`` take either ``(amount, unit)`` or a single
    composite ``timedelta``/``relativedelta``, and return the strategy so
    calls chain left to right.  Strategies backed by the real clock reject
    them.
    """

    def advance_by(
        self, amount: int | TemporalAmount, unit: TimeUnit | str | None = None
    ) -> ClockStrategy: ...

    def reverse_by(
        self, amount: int | TemporalAmount, unit: TimeUnit | str | None = None
    ) -> ClockStrategy: ...

    def today(self) -> date: ...
    def now(self) -> datetime: ...
    def now_datetime(self) -> datetime: ...


__all__ = ["ClockStrategy"]
