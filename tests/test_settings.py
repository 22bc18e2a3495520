import pytest
from pydantic import ValidationError

from cabfare.settings import FareSettings, LoggingSettings, Settings, get_settings


class TestFareSettings:
    def test_defaults(self):
        settings = FareSettings()
        assert settings.cache_ttl_seconds == 300

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("FARE_CACHE_TTL_SECONDS", "120")

        settings = FareSettings()
        assert settings.cache_ttl_seconds == 120

    def test_validation(self):
        with pytest.raises(ValidationError):
            FareSettings(cache_ttl_seconds=0)

        with pytest.raises(ValidationError):
            FareSettings(cache_ttl_seconds=100_000)


class TestLoggingSettings:
    def test_defaults(self):
        settings = LoggingSettings()
        assert settings.level == "INFO"
        assert settings.format == "text"
        assert settings.environment == "development"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_FORMAT", "json")

        settings = LoggingSettings()
        assert settings.level == "DEBUG"
        assert settings.format == "json"

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            LoggingSettings(level="VERBOSE")


class TestSettings:
    def test_composes_groups(self):
        settings = get_settings()
        assert isinstance(settings, Settings)
        assert settings.fare.cache_ttl_seconds == 300
        assert settings.logging.level == "INFO"

    def test_reads_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("FARE_CACHE_TTL_SECONDS", "60")

        assert get_settings().fare.cache_ttl_seconds == 60
