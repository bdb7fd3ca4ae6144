"""Testing generators – Hypothesis strategies for clock property tests."""
from utc_clock.testing.generators.strategies import (
    calendar_safe_datetimes,
    day_of_week_strategy,
    time_units,
)

__all__ = ["calendar_safe_datetimes", "day_of_week_strategy", "time_units"]
