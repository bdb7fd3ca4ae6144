"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── ClockError                   (clock.py)
        ├── MissingArgumentError     (also a TypeError)
        └── UnsupportedMutationError (also a NotImplementedError)
"""

from utc_clock.kernel.errors.base import BaseError
from utc_clock.kernel.errors.clock import (
    ClockError,
    MissingArgumentError,
    UnsupportedMutationError,
    require,
)

__all__ = [
    "BaseError",
    "ClockError",
    "MissingArgumentError",
    "UnsupportedMutationError",
    "require",
]
