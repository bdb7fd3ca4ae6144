"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog


class ClockTimeStamper:
    """structlog processor that stamps events with :meth:`Clock.now`.

    Unlike ``structlog.processors.TimeStamper`` the time comes from the
    active clock strategy, so log output produced under a fixed clock is
    reproducible.

    Usage::

        structlog.configure(processors=[ClockTimeStamper(), ...])
    """

    def __init__(self, key: str = "timestamp") -> None:
        self._key = key

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        from utc_clock.kernel.time.facade import Clock

        event_dict.setdefault(self._key, Clock.now().isoformat().replace("+00:00", "Z"))
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger backed by a stdlib logger.

    Events end up in :mod:`logging`, so nothing is emitted until the host
    application (or :meth:`JsonLoggerFactory.configure`) installs a handler.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    return structlog.wrap_logger(logging.getLogger(name), **initial_values)


__all__ = ["ClockTimeStamper", "get_logger"]
