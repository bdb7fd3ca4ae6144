"""Config settings – ClockSettings and start-up wiring of the Clock facade.

``UTC_CLOCK_FIXED_AT`` pins the process clock at start-up, which is handy
for reproducing a bug "as of" a given day::

    UTC_CLOCK_FIXED_AT=2024-02-29T23:59:00Z python -m myapp
"""
from __future__ import annotations

import dataclasses
import logging
import re
from datetime import date, datetime
from typing import ClassVar

from utc_clock.config.settings.base import Settings
from utc_clock.config.settings.loaders import EnvSettingsLoader
from utc_clock.config.validation import InvalidSettingValueError
from utc_clock.kernel.time import Clock, ClockStrategy, Seed
from utc_clock.observability.logging import JsonLoggerFactory, get_logger

_log = get_logger(__name__)

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_seed(text: str) -> Seed:
    """Parse an ISO-8601 string into a clock seed.

    ``2024-02-29`` gives a ``date``, ``2024-02-29T10:00:00`` a naive UTC
    date-time and anything with an offset (``Z``, ``+02:00``) an instant.
    """
    text = text.strip()
    if _DATE_ONLY.match(text):
        return date.fromisoformat(text)
    return datetime.fromisoformat(text)


@dataclasses.dataclass
class ClockSettings(Settings):
    """Environment driven clock configuration (prefix ``UTC_CLOCK``)."""

    _prefix: ClassVar[str] = "UTC_CLOCK"

    fixed_at: str | None = None
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.fixed_at:
            try:
                parse_seed(self.fixed_at)
            except ValueError as exc:
                raise InvalidSettingValueError("fixed_at", self.fixed_at, str(exc)) from exc
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")

    @property
    def seed(self) -> Seed | None:
        return parse_seed(self.fixed_at) if self.fixed_at else None


def load_clock_settings() -> ClockSettings:
    return EnvSettingsLoader().load(ClockSettings)


def configure_clock(
    settings: ClockSettings | None = None, *, configure_logging: bool = False
) -> ClockStrategy:
    """Install the strategy described by *settings* and return it.

    Reads the environment when *settings* is omitted.  With
    *configure_logging* the JSON log pipeline is set up at
    ``settings.log_level`` first, so the install itself is logged.
    """
    settings = settings or load_clock_settings()
    if configure_logging:
        JsonLoggerFactory.configure(level=settings.log_level.upper())
    seed = settings.seed
    if seed is None:
        Clock.restore_default_clock()
    else:
        Clock.set_fixed_clock(seed)
        _log.info("clock.fixed_from_settings", fixed_at=settings.fixed_at)
    return Clock.current_clock()


__all__ = ["ClockSettings", "configure_clock", "load_clock_settings", "parse_seed"]
