"""Kernel time – ClockStrategy port, real/fixed strategies and the Clock facade."""
from utc_clock.kernel.time.conversions import Seed
from utc_clock.kernel.time.facade import AnyClockStrategy, Clock
from utc_clock.kernel.time.fixed import FixedClockStrategy
from utc_clock.kernel.time.real import RealClockStrategy
from utc_clock.kernel.time.strategy import ClockStrategy
from utc_clock.kernel.time.units import DayOfWeek, TemporalAmount, TimeUnit, truncate

__all__ = [
    "AnyClockStrategy",
    "Clock",
    "ClockStrategy",
    "DayOfWeek",
    "FixedClockStrategy",
    "RealClockStrategy",
    "Seed",
    "TemporalAmount",
    "TimeUnit",
    "truncate",
]
