"""Testing fixtures – pytest fixtures around the Clock facade.

Enable in ``conftest.py``::

    pytest_plugins = ["utc_clock.testing.fixtures"]
"""
from utc_clock.testing.fixtures.clock import fixed_clock, real_clock

__all__ = ["fixed_clock", "real_clock"]
