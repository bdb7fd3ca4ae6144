"""Config – 12-factor settings for the clock facade."""

from utc_clock.config.settings import (
    ClockSettings,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
    configure_clock,
    load_clock_settings,
    parse_seed,
)
from utc_clock.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ClockSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "configure_clock",
    "load_clock_settings",
    "parse_seed",
]
