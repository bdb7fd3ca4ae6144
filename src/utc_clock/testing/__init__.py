"""Testing support – fakes, fixtures and Hypothesis generators.

Import in your ``conftest.py``::

    pytest_plugins = ["utc_clock.testing.fixtures"]
"""

from utc_clock.testing.fakes import FakeClock
from utc_clock.testing.generators import (
    calendar_safe_datetimes,
    day_of_week_strategy,
    time_units,
)

__all__ = [
    "FakeClock",
    "calendar_safe_datetimes",
    "day_of_week_strategy",
    "time_units",
]
