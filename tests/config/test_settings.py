"""Tests for centralized configuration settings."""

import pytest
from pydantic import ValidationError

from wphelpers.config import (
    LoggingSettings,
    NotifierSettings,
    Settings,
    get_settings,
    reset_settings,
)


class TestLoggingSettings:
    """Tests for logging configuration."""

    def test_default_values(self):
        settings = LoggingSettings()
        assert settings.debug_all is False
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DEBUG_ALL", "true")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = LoggingSettings()
        assert settings.debug_all is True
        assert settings.log_level == "DEBUG"

    def test_rejects_unknown_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            LoggingSettings()


class TestNotifierSettings:
    """Tests for notifier configuration."""

    def test_default_values(self):
        assert NotifierSettings().prefix == "wphelpers"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("NOTIFIER_PREFIX", "acme-plugin")
        assert NotifierSettings().prefix == "acme-plugin"

    @pytest.mark.parametrize("prefix", ["", "acme plugin", "acme?"])
    def test_rejects_malformed_prefix(self, monkeypatch, prefix):
        monkeypatch.setenv("NOTIFIER_PREFIX", prefix)
        with pytest.raises(ValidationError):
            NotifierSettings()


class TestSettings:
    """Tests for root settings and the singleton accessor."""

    def test_nested_defaults(self):
        settings = Settings()
        assert isinstance(settings.logging, LoggingSettings)
        assert isinstance(settings.notifier, NotifierSettings)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_reset_settings(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("NOTIFIER_PREFIX", "other")
        assert get_settings().notifier.prefix == first.notifier.prefix

        reset_settings()
        assert get_settings().notifier.prefix == "other"
