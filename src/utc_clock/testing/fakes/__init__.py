"""Testing fakes – deterministic doubles for the clock port."""
from utc_clock.testing.fakes.clock import FakeClock

__all__ = ["FakeClock"]
