"""Kernel time – conversions between instants, dates and naive UTC date-times."""
from __future__ import annotations

from datetime import UTC, date, datetime, time

Seed = date | datetime


def is_instant(value: datetime) -> bool:
    """``True`` when *value* carries a usable UTC offset."""
    return value.tzinfo is not None and value.utcoffset() is not None


def instant_to_utc_datetime(instant: datetime) -> datetime:
    """Project an aware instant onto the naive UTC date-time."""
    if not isinstance(instant, datetime) or not is_instant(instant):
        raise TypeError(f"Instant must be a timezone-aware datetime, got {instant!r}")
    return instant.astimezone(UTC).replace(tzinfo=None)


def date_to_utc_datetime(value: date) -> datetime:
    """Midnight of *value*.

    A datetime keeps only its date part, taken in UTC when it is aware.
    """
    if not isinstance(value, date):
        raise TypeError(f"Date must be a datetime.date, got {type(value).__name__}")
    if isinstance(value, datetime) and is_instant(value):
        value = instant_to_utc_datetime(value)
    return datetime.combine(date(value.year, value.month, value.day), time.min)


def utc_datetime_to_instant(value: datetime) -> datetime:
    return value.replace(tzinfo=UTC)


def seed_to_utc_datetime(seed: Seed) -> datetime:
    """Normalise any seed to a naive UTC date-time.

    Aware datetimes are instants, naive ones are taken as UTC already and
    plain dates become midnight.  A ``tzinfo`` without an offset counts as
    naive and is dropped.
    """
    if isinstance(seed, datetime):
        return instant_to_utc_datetime(seed) if is_instant(seed) else seed.replace(tzinfo=None)
    if isinstance(seed, date):
        return date_to_utc_datetime(seed)
    raise TypeError(f"Cannot seed a clock from {type(seed).__name__}")


__all__ = [
    "Seed",
    "date_to_utc_datetime",
    "instant_to_utc_datetime",
    "is_instant",
    "seed_to_utc_datetime",
    "utc_datetime_to_instant",
]
