"""Unit tests for ClockSettings and configure_clock."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from utc_clock.config import (
    ClockSettings,
    InvalidSettingValueError,
    configure_clock,
    load_clock_settings,
    parse_seed,
)
from utc_clock.kernel.time import Clock, FixedClockStrategy, RealClockStrategy


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("UTC_CLOCK_FIXED_AT", raising=False)
    monkeypatch.delenv("UTC_CLOCK_LOG_LEVEL", raising=False)


class TestParseSeed:
    def test_date(self) -> None:
        assert parse_seed("2024-02-29") == date(2024, 2, 29)
        assert type(parse_seed("2024-02-29")) is date

    def test_naive_datetime(self) -> None:
        assert parse_seed("2024-02-29T10:15:00") == datetime(2024, 2, 29, 10, 15)

    def test_instant_with_z(self) -> None:
        assert parse_seed("2024-02-29T10:15:00Z") == datetime(2024, 2, 29, 10, 15, tzinfo=UTC)

    def test_instant_with_offset(self) -> None:
        seed = parse_seed(" 2024-02-29T10:15:00+02:00 ")
        assert seed.utcoffset() == timedelta(hours=2)

    def test_garbage(self) -> None:
        with pytest.raises(ValueError):
            parse_seed("yesterday")


class TestClockSettings:
    def test_defaults(self) -> None:
        settings = ClockSettings()
        assert settings.fixed_at is None
        assert settings.log_level == "INFO"
        assert settings.seed is None

    def test_seed_is_parsed(self) -> None:
        assert ClockSettings(fixed_at="2024-01-15").seed == date(2024, 1, 15)

    def test_invalid_fixed_at(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            ClockSettings(fixed_at="not-a-date")
        assert exc_info.value.setting_name == "fixed_at"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            ClockSettings(log_level="LOUD")
        assert exc_info.value.setting_name == "log_level"

    def test_loaded_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UTC_CLOCK_FIXED_AT", "2024-01-15T10:30:00")
        monkeypatch.setenv("UTC_CLOCK_LOG_LEVEL", "debug")
        settings = load_clock_settings()
        assert settings.fixed_at == "2024-01-15T10:30:00"
        assert settings.log_level == "debug"

    def test_invalid_environment_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UTC_CLOCK_FIXED_AT", "soon")
        with pytest.raises(InvalidSettingValueError):
            load_clock_settings()


class TestConfigureClock:
    def test_installs_fixed_clock(self) -> None:
        strategy = configure_clock(ClockSettings(fixed_at="2024-01-15T10:30:00"))
        assert isinstance(strategy, FixedClockStrategy)
        assert Clock.current_clock() is strategy
        assert Clock.now_datetime() == datetime(2024, 1, 15, 10, 30)

    def test_instant_is_converted_to_utc(self) -> None:
        configure_clock(ClockSettings(fixed_at="2024-01-15T01:00:00+03:00"))
        assert Clock.today() == date(2024, 1, 14)
        assert Clock.now() == datetime(2024, 1, 14, 22, 0, tzinfo=timezone.utc)

    def test_without_fixed_at_restores_real_clock(self) -> None:
        Clock.set_fixed_clock(date(2000, 1, 1))
        strategy = configure_clock(ClockSettings())
        assert isinstance(strategy, RealClockStrategy)

    def test_configures_logging_level(self) -> None:
        with patch("utc_clock.config.settings.clock.JsonLoggerFactory") as factory:
            configure_clock(ClockSettings(log_level="warning"), configure_logging=True)
        factory.configure.assert_called_once_with(level="WARNING")

    def test_logging_left_alone_by_default(self) -> None:
        with patch("utc_clock.config.settings.clock.JsonLoggerFactory") as factory:
            configure_clock(ClockSettings())
        factory.configure.assert_not_called()

    def test_reads_environment_when_no_settings_given(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UTC_CLOCK_FIXED_AT", "2024-01-15")
        configure_clock()
        assert Clock.today() == date(2024, 1, 15)
