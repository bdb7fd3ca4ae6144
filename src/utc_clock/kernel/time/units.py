"""Kernel time – temporal units, days of the week and truncation."""
from __future__ import annotations

import enum
from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from utc_clock.kernel.errors import require

TemporalAmount = timedelta | relativedelta


class TimeUnit(str, enum.Enum):
    """Unit of date-time arithmetic.

    Month based units (``MONTHS`` and above) go through
    :class:`~dateutil.relativedelta.relativedelta`, so adding one month to
    January 31st lands on the last day of February instead of overflowing.
    """

    MICROSECONDS = "microseconds"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    HALF_DAYS = "half_days"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"
    DECADES = "decades"
    CENTURIES = "centuries"
    MILLENNIA = "millennia"

    def delta(self, amount: int) -> relativedelta:
        """Return *amount* of this unit as a ``relativedelta``."""
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"Amount must be an int, got {type(amount).__name__}")
        field, factor = _DELTA_FIELDS[self]
        return relativedelta(**{field: amount * factor})

    @classmethod
    def of(cls, unit: TimeUnit | str) -> TimeUnit:
        """Coerce *unit* (member or value such as ``"days"``) to a :class:`TimeUnit`."""
        require(unit, "Temporal unit cannot be None", argument="unit")
        if isinstance(unit, cls):
            return unit
        try:
            return cls(str(unit).lower())
        except ValueError:
            raise ValueError(f"Unknown temporal unit: {unit!r}") from None


_DELTA_FIELDS: dict[TimeUnit, tuple[str, int]] = {
    TimeUnit.MICROSECONDS: ("microseconds", 1),
    TimeUnit.MILLISECONDS: ("microseconds", 1_000),
    TimeUnit.SECONDS: ("seconds", 1),
    TimeUnit.MINUTES: ("minutes", 1),
    TimeUnit.HOURS: ("hours", 1),
    TimeUnit.HALF_DAYS: ("hours", 12),
    TimeUnit.DAYS: ("days", 1),
    TimeUnit.WEEKS: ("days", 7),
    TimeUnit.MONTHS: ("months", 1),
    TimeUnit.YEARS: ("years", 1),
    TimeUnit.DECADES: ("years", 10),
    TimeUnit.CENTURIES: ("years", 100),
    TimeUnit.MILLENNIA: ("years", 1_000),
}


class DayOfWeek(enum.IntEnum):
    """ISO day of the week, numbered like :meth:`datetime.date.weekday`."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


def as_temporal_amount(amount: TemporalAmount) -> TemporalAmount:
    """Validate a composite amount (``timedelta`` or ``relativedelta``)."""
    require(amount, "Temporal amount cannot be None", argument="amount")
    if not isinstance(amount, (timedelta, relativedelta)):
        raise TypeError(
            f"Temporal amount must be a timedelta or relativedelta, got {type(amount).__name__}"
        )
    return amount


def truncate(value: datetime, unit: TimeUnit | str = TimeUnit.MICROSECONDS) -> datetime:
    """Drop every field of *value* finer than *unit*.

    Only units up to ``DAYS`` are valid; anything larger does not divide a
    day evenly and raises ``ValueError``.  Timezone info is preserved.
    """
    unit = TimeUnit.of(unit)
    if unit is TimeUnit.MICROSECONDS:
        return value
    if unit is TimeUnit.MILLISECONDS:
        return value.replace(microsecond=value.microsecond // 1_000 * 1_000)
    if unit is TimeUnit.SECONDS:
        return value.replace(microsecond=0)
    if unit is TimeUnit.MINUTES:
        return value.replace(second=0, microsecond=0)
    if unit is TimeUnit.HOURS:
        return value.replace(minute=0, second=0, microsecond=0)
    if unit is TimeUnit.HALF_DAYS:
        return value.replace(hour=value.hour // 12 * 12, minute=0, second=0, microsecond=0)
    if unit is TimeUnit.DAYS:
        return value.replace(hour=0, minute=0, second=0, microsecond=0)
    raise ValueError(f"Unit is too large to be used for truncation: {unit.value}")


__all__ = ["DayOfWeek", "TemporalAmount", "TimeUnit", "as_temporal_amount", "truncate"]
