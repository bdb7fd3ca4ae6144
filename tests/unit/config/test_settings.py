"""Unit tests for config settings & validation."""

import os
from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from utc_clock.config.settings import EnvSettingsLoader, Settings
from utc_clock.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    ratio: float = 0.5
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in list(os.environ):
            if key.startswith("APP_"):
                monkeypatch.delenv(key)
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings == AppSettings()

    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        assert EnvSettingsLoader().load(AppSettings).host == "example.com"

    def test_loads_int_and_float(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "9000")
        monkeypatch.setenv("APP_RATIO", "0.25")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.port == 9000
        assert settings.ratio == 0.25

    def test_loads_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            monkeypatch.setenv("APP_DEBUG", truthy)
            assert EnvSettingsLoader().load(AppSettings).debug is True
        for falsy in ("false", "0", "no", "off"):
            monkeypatch.setenv("APP_DEBUG", falsy)
            assert EnvSettingsLoader().load(AppSettings).debug is False

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "a.com, b.com,,")
        assert EnvSettingsLoader().load(AppSettings).allowed_origins == ["a.com", "b.com"]

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQ_TOKEN", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_TOKEN"

    def test_bad_coercion_raises_value_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "not-a-number")
        with pytest.raises(ValueError):
            EnvSettingsLoader().load(AppSettings)


class TestConfigErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(MissingRequiredSettingError, ConfigError)
        assert issubclass(InvalidSettingValueError, ConfigError)

    def test_invalid_value_message(self) -> None:
        err = InvalidSettingValueError("fixed_at", "nope", "bad date")
        assert err.message == "Setting 'fixed_at' has invalid value 'nope': bad date"
        assert err.code == "invalid_setting_value"
