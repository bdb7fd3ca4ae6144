"""Kernel time – RealClockStrategy."""
from __future__ import annotations

from datetime import UTC, date, datetime
from typing import NoReturn, final

from utc_clock.kernel.errors import UnsupportedMutationError
from utc_clock.kernel.time.units import TemporalAmount, TimeUnit


@final
class RealClockStrategy:
    """Production strategy that reads ``datetime.now(UTC)`` on every call."""

    def advance_by(
        self, amount: int | TemporalAmount, unit: TimeUnit | str | None = None
    ) -> NoReturn:
        # Real time cannot be moved.
        raise UnsupportedMutationError(type(self).__name__)

    def reverse_by(
        self, amount: int | TemporalAmount, unit: TimeUnit | str | None = None
    ) -> NoReturn:
        raise UnsupportedMutationError(type(self).__name__)

    def today(self) -> date:
        return datetime.now(UTC).date()

    def now(self) -> datetime:
        return datetime.now(UTC)

    def now_datetime(self) -> datetime:
        return datetime.now(UTC).replace(tzinfo=None)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["RealClockStrategy"]
