"""Kernel – clock strategies, the Clock facade and the error hierarchy."""

from utc_clock.kernel.errors import (
    BaseError,
    ClockError,
    MissingArgumentError,
    UnsupportedMutationError,
)
from utc_clock.kernel.time import (
    Clock,
    ClockStrategy,
    DayOfWeek,
    FixedClockStrategy,
    RealClockStrategy,
    TimeUnit,
)

__all__ = [
    "BaseError",
    "Clock",
    "ClockError",
    "ClockStrategy",
    "DayOfWeek",
    "FixedClockStrategy",
    "MissingArgumentError",
    "RealClockStrategy",
    "TimeUnit",
    "UnsupportedMutationError",
]
