"""Kernel time – FixedClockStrategy."""
from __future__ import annotations

from datetime import date, datetime
from typing import final

from utc_clock.kernel.errors import MissingArgumentError, require
from utc_clock.kernel.time.conversions import (
    Seed,
    date_to_utc_datetime,
    instant_to_utc_datetime,
    is_instant,
    seed_to_utc_datetime,
    utc_datetime_to_instant,
)
from utc_clock.kernel.time.units import TemporalAmount, TimeUnit, as_temporal_amount
from utc_clock.observability.logging.processors import get_logger

_log = get_logger(__name__)


@final
class FixedClockStrategy:
    """Test strategy holding a single mutable naive UTC date-time.

    Reads project the stored value; ``advance_by``/``reverse_by`` move it in
    place with calendar-aware arithmetic and return ``self``::

        clock = FixedClockStrategy(datetime(2023, 6, 15, 14, 30, 45))
        clock.advance_by(1, TimeUnit.DAYS).advance_by(2, TimeUnit.HOURS)
        clock.now_datetime()  # 2023-06-16 16:30:45
    """

    def __init__(self, seed: Seed) -> None:
        require(seed, "Seed cannot be None", argument="seed")
        self._datetime = seed_to_utc_datetime(seed)

    @classmethod
    def from_date(cls, value: date) -> FixedClockStrategy:
        """Fix the clock at midnight UTC of *value*."""
        require(value, "Date cannot be None", argument="date")
        return cls(date_to_utc_datetime(value))

    @classmethod
    def from_datetime(cls, value: datetime) -> FixedClockStrategy:
        """Fix the clock at the naive UTC date-time *value*."""
        require(value, "DateTime cannot be None", argument="date_time")
        if not isinstance(value, datetime) or is_instant(value):
            raise TypeError(f"DateTime must be a naive datetime, got {value!r}")
        return cls(value)

    @classmethod
    def from_instant(cls, value: datetime) -> FixedClockStrategy:
        """Fix the clock at the aware instant *value*, converted to UTC."""
        require(value, "Instant cannot be None", argument="instant")
        return cls(instant_to_utc_datetime(value))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def advance_by(
        self, amount: int | TemporalAmount, unit: TimeUnit | str | None = None
    ) -> FixedClockStrategy:
        delta = _resolve(amount, unit)
        self._datetime = self._datetime + delta
        _log.debug("clock.advanced", by=repr(delta), now=self._datetime.isoformat())
        return self

    def reverse_by(
        self, amount: int | TemporalAmount, unit: TimeUnit | str | None = None
    ) -> FixedClockStrategy:
        delta = _resolve(amount, unit)
        self._datetime = self._datetime - delta
        _log.debug("clock.reversed", by=repr(delta), now=self._datetime.isoformat())
        return self

    def set(self, seed: Seed) -> FixedClockStrategy:
        """Jump to *seed* (same rules as the constructor)."""
        require(seed, "Seed cannot be None", argument="seed")
        self._datetime = seed_to_utc_datetime(seed)
        return self

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def today(self) -> date:
        return self._datetime.date()

    def now(self) -> datetime:
        return utc_datetime_to_instant(self._datetime)

    def now_datetime(self) -> datetime:
        return self._datetime

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._datetime.isoformat()})"


def _resolve(amount: int | TemporalAmount, unit: TimeUnit | str | None) -> TemporalAmount:
    require(amount, "Temporal amount cannot be None", argument="amount")
    if unit is not None:
        return TimeUnit.of(unit).delta(amount)  # type: ignore[arg-type]
    if isinstance(amount, int):
        raise MissingArgumentError("Temporal unit cannot be None", argument="unit")
    return as_temporal_amount(amount)


__all__ = ["FixedClockStrategy"]
