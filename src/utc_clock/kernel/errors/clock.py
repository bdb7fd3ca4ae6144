"""Clock errors — argument validation and rejected mutations."""

from __future__ import annotations

from typing import Any

from utc_clock.kernel.errors.base import BaseError


class ClockError(BaseError):
    """Base class for every error raised by the clock kernel."""

    default_code = "clock_error"


class MissingArgumentError(ClockError, TypeError):
    """A required argument was ``None``.

    Raised before any state is touched.  ``argument`` names the missing
    parameter (``"instant"``, ``"day_of_week"`` ...).

    The exact text (``"Date cannot be None"``) is in ``message``;
    ``str()`` gives the JSON form of :meth:`to_dict`, like every
    :class:`BaseError`.
    """

    default_code = "missing_argument"

    def __init__(self, message: str, *, argument: str, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"argument": argument})
        super().__init__(message, **kwargs)
        self.argument = argument


class UnsupportedMutationError(ClockError, NotImplementedError):
    """A strategy that cannot be mutated was asked to advance or reverse."""

    default_code = "unsupported_mutation"

    def __init__(self, strategy: str, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"strategy": strategy})
        super().__init__(f"Tried to modify {strategy}", **kwargs)
        self.strategy = strategy


def require(value: Any, message: str, *, argument: str) -> Any:
    """Return *value* unchanged, or raise :class:`MissingArgumentError` when it is ``None``."""
    if value is None:
        raise MissingArgumentError(message, argument=argument)
    return value


__all__ = [
    "ClockError",
    "MissingArgumentError",
    "UnsupportedMutationError",
    "require",
]
