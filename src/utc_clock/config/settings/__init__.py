"""Config settings – 12-factor env-based configuration."""
from utc_clock.config.settings.base import Settings
from utc_clock.config.settings.clock import (
    ClockSettings,
    configure_clock,
    load_clock_settings,
    parse_seed,
)
from utc_clock.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = [
    "ClockSettings",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "configure_clock",
    "load_clock_settings",
    "parse_seed",
]
