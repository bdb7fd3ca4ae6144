"""Kernel time – Clock, the process-wide facade over the active strategy.

Every read goes through the strategy installed with
:meth:`Clock.set_current_clock` (a :class:`RealClockStrategy` by default)::

    Clock.set_fixed_clock(datetime(2024, 1, 15, 10, 30))
    Clock.today()        # date(2024, 1, 15)
    Clock.in_days(7)     # date(2024, 1, 22)
    Clock.restore_default_clock()

Instants and date-times leave the facade truncated to microseconds.  The
active strategy sits in a lock-guarded cell, so swaps and reads never
interleave; a fixed strategy's own mutations are not synchronised.
"""
from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date, datetime, timedelta
from typing import Any, Final

from dateutil.relativedelta import relativedelta

from utc_clock.kernel.errors import require
from utc_clock.kernel.time.conversions import Seed, instant_to_utc_datetime
from utc_clock.kernel.time.fixed import FixedClockStrategy
from utc_clock.kernel.time.real import RealClockStrategy
from utc_clock.kernel.time.strategy import ClockStrategy
from utc_clock.kernel.time.units import DayOfWeek, TemporalAmount, TimeUnit, truncate
from utc_clock.observability.logging.processors import get_logger

_log = get_logger(__name__)

_MISSING: Final[Any] = object()

AnyClockStrategy = RealClockStrategy | FixedClockStrategy


class _ClockCell:
    """Lock-guarded holder of the active strategy."""

    def __init__(self, strategy: ClockStrategy) -> None:
        self._lock = threading.RLock()
        self._strategy = strategy

    def get(self) -> ClockStrategy:
        with self._lock:
            return self._strategy

    def swap(self, strategy: ClockStrategy) -> ClockStrategy:
        """Install *strategy* and return the one it replaced."""
        with self._lock:
            previous, self._strategy = self._strategy, strategy
            return previous


class Clock:
    """Static entry point for "what time is it" in UTC."""

    _cell: _ClockCell = _ClockCell(RealClockStrategy())

    # ------------------------------------------------------------------
    # Strategy management
    # ------------------------------------------------------------------

    @classmethod
    def set_current_clock(cls, strategy: ClockStrategy) -> None:
        require(strategy, "Clock implementation cannot be None", argument="strategy")
        cls._cell.swap(strategy)
        _log.debug("clock.installed", strategy=type(strategy).__name__)

    @classmethod
    def current_clock(cls) -> ClockStrategy:
        return cls._cell.get()

    @classmethod
    def set_fixed_clock(cls, seed: Seed = _MISSING) -> FixedClockStrategy:
        """Install a fixed clock and return it.

        Without an argument the clock is fixed at midnight of the real UTC
        date.  *seed* may be a ``date``, a naive ``datetime`` (UTC) or an
        aware ``datetime`` (any offset, converted to UTC).
        """
        strategy = cls._fixed_from(seed)
        cls.set_current_clock(strategy)
        return strategy

    @classmethod
    def set_fixed_clock_at_date(cls, value: date) -> FixedClockStrategy:
        require(value, "Date cannot be None", argument="date")
        strategy = FixedClockStrategy.from_date(value)
        cls.set_current_clock(strategy)
        return strategy

    @classmethod
    def set_fixed_clock_at_datetime(cls, value: datetime) -> FixedClockStrategy:
        require(value, "DateTime cannot be None", argument="date_time")
        strategy = FixedClockStrategy.from_datetime(value)
        cls.set_current_clock(strategy)
        return strategy

    @classmethod
    def set_fixed_clock_at_instant(cls, value: datetime) -> FixedClockStrategy:
        require(value, "Instant cannot be None", argument="instant")
        strategy = FixedClockStrategy.from_instant(value)
        cls.set_current_clock(strategy)
        return strategy

    @classmethod
    def restore_default_clock(cls) -> None:
        cls._cell.swap(RealClockStrategy())
        _log.debug("clock.restored")

    reset = restore_default_clock

    @classmethod
    @contextmanager
    def fixed(cls, seed: Seed = _MISSING) -> Iterator[FixedClockStrategy]:
        """Run a block under a fixed clock, then put the previous strategy back.

        ::

            with Clock.fixed(date(2024, 2, 29)) as clock:
                clock.advance_by(1, TimeUnit.YEARS)
                assert Clock.today() == date(2025, 2, 28)
        """
        strategy = cls._fixed_from(seed)
        previous = cls._cell.swap(strategy)
        _log.debug("clock.installed", strategy=type(strategy).__name__)
        try:
            yield strategy
        finally:
            cls._cell.swap(previous)
            _log.debug("clock.installed", strategy=type(previous).__name__)

    @classmethod
    def advance_by(
        cls, amount: int | TemporalAmount, unit: TimeUnit | str | None = None
    ) -> ClockStrategy:
        """Advance the active strategy; the real clock refuses."""
        return cls.current_clock().advance_by(amount, unit)

    @classmethod
    def reverse_by(
        cls, amount: int | TemporalAmount, unit: TimeUnit | str | None = None
    ) -> ClockStrategy:
        return cls.current_clock().reverse_by(amount, unit)

    @staticmethod
    def _fixed_from(seed: Seed) -> FixedClockStrategy:
        if seed is _MISSING:
            return FixedClockStrategy.from_date(RealClockStrategy().today())
        return FixedClockStrategy(seed)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @classmethod
    def today(cls) -> date:
        return cls.current_clock().today()

    @classmethod
    def now(cls) -> datetime:
        """Current instant (aware, UTC), truncated to microseconds."""
        return truncate(cls.current_clock().now(), TimeUnit.MICROSECONDS)

    @classmethod
    def now_datetime(cls) -> datetime:
        """Current naive UTC date-time, truncated to microseconds."""
        return truncate(cls.current_clock().now_datetime(), TimeUnit.MICROSECONDS)

    # ------------------------------------------------------------------
    # Relative dates
    # ------------------------------------------------------------------

    @classmethod
    def yesterday(cls) -> date:
        return cls.days_ago(1)

    @classmethod
    def tomorrow(cls) -> date:
        return cls.in_days(1)

    @classmethod
    def days_ago(cls, n: int) -> date:
        return cls.today() - timedelta(days=n)

    @classmethod
    def in_days(cls, n: int) -> date:
        return cls.today() + timedelta(days=n)

    @classmethod
    def months_ago(cls, n: int) -> date:
        return cls.today() - relativedelta(months=n)

    @classmethod
    def in_months(cls, n: int) -> date:
        return cls.today() + relativedelta(months=n)

    @classmethod
    def years_ago(cls, n: int) -> date:
        return cls.today() - relativedelta(years=n)

    @classmethod
    def in_years(cls, n: int) -> date:
        return cls.today() + relativedelta(years=n)

    @classmethod
    def previous(cls, day_of_week: DayOfWeek | int) -> date:
        """Closest *day_of_week* strictly before today."""
        require(day_of_week, "Day of week cannot be None", argument="day_of_week")
        today = cls.today()
        back = (today.weekday() - DayOfWeek(day_of_week)) % 7 or 7
        return today - timedelta(days=back)

    @classmethod
    def next(cls, day_of_week: DayOfWeek | int) -> date:
        """Closest *day_of_week* strictly after today."""
        require(day_of_week, "Day of week cannot be None", argument="day_of_week")
        today = cls.today()
        ahead = (DayOfWeek(day_of_week) - today.weekday()) % 7 or 7
        return today + timedelta(days=ahead)

    # ------------------------------------------------------------------
    # Conversions (independent of the active strategy)
    # ------------------------------------------------------------------

    @staticmethod
    def to_utc_date(instant: datetime) -> date:
        require(instant, "Instant cannot be None", argument="instant")
        return instant_to_utc_datetime(instant).date()

    @staticmethod
    def to_utc_datetime(instant: datetime) -> datetime:
        require(instant, "Instant cannot be None", argument="instant")
        return instant_to_utc_datetime(instant)


__all__ = ["AnyClockStrategy", "Clock"]
