"""
utc_clock – a swappable, UTC-only "current time" for Python code and its tests.

Import path convention::

    from utc_clock import Clock, TimeUnit, DayOfWeek
    from utc_clock.kernel.time import FixedClockStrategy, RealClockStrategy
    from utc_clock.config import ClockSettings, configure_clock

In ``conftest.py``::

    pytest_plugins = ["utc_clock.testing.fixtures"]
"""

from utc_clock.kernel.errors import ClockError, MissingArgumentError, UnsupportedMutationError
from utc_clock.kernel.time import (
    Clock,
    ClockStrategy,
    DayOfWeek,
    FixedClockStrategy,
    RealClockStrategy,
    TimeUnit,
)

__version__ = "0.1.0"
__all__ = [
    "Clock",
    "ClockError",
    "ClockStrategy",
    "DayOfWeek",
    "FixedClockStrategy",
    "MissingArgumentError",
    "RealClockStrategy",
    "TimeUnit",
    "UnsupportedMutationError",
    "__version__",
]
