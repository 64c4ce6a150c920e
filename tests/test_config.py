"""Tests for settings loaded from the environment."""

from decimal import Decimal

import pytest

from compensation_engine.config import Settings

ENV_VARS = [
    "ENGINE_VERSION",
    "HOST",
    "PORT",
    "DEBUG",
    "LOG_LEVEL",
    "DIFFERENTIAL_CATALOG_PATH",
    "DEFAULT_SHIFT_HOURS",
    "MIN_HOURLY_RATE",
    "MAX_HOURLY_RATE",
    "OUTLIER_THRESHOLD",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self, clean_env):
        settings = Settings.from_env()
        assert settings.port == 8000
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.catalog_path is None
        assert settings.default_shift_hours == 12

        rules = settings.compensation_rules()
        assert rules.min_hourly_rate == Decimal("15")
        assert rules.max_hourly_rate == Decimal("200")
        assert rules.outlier_threshold == Decimal("0.3")

    def test_overrides(self, clean_env):
        clean_env.setenv("PORT", "9000")
        clean_env.setenv("DEBUG", "true")
        clean_env.setenv("LOG_LEVEL", "debug")
        clean_env.setenv("DIFFERENTIAL_CATALOG_PATH", "/etc/catalog.json")
        clean_env.setenv("MIN_HOURLY_RATE", "20")

        settings = Settings.from_env()
        assert settings.PORT == 9000
        assert settings.DEBUG is True
        assert settings.log_level == "DEBUG"
        assert settings.catalog_path == "/etc/catalog.json"
        assert settings.compensation_rules().min_hourly_rate == Decimal("20")

    def test_inconsistent_rules(self, clean_env):
        clean_env.setenv("MIN_HOURLY_RATE", "250")
        with pytest.raises(ValueError):
            Settings.from_env().compensation_rules()
