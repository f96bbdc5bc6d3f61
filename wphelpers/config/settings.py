"""Centralized configuration management using pydantic-settings.

This module provides type-safe configuration with environment variable loading,
validation, and sensible defaults for all wphelpers settings.
"""

import re
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

UNIQUE_PATTERN = re.compile(r"^[a-zA-Z0-9_\-\u0080-\U0010ffff]+$")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    debug_all: bool = Field(
        default=False,
        validation_alias="DEBUG_ALL",
        description="Enable debug logging for all libraries",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level for wphelpers namespace",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class NotifierSettings(BaseSettings):
    """Notifier configuration."""

    model_config = SettingsConfigDict(env_prefix="NOTIFIER_", extra="ignore")

    prefix: str = Field(
        default="wphelpers",
        description="Unique prefix for query string notices",
    )

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        if not UNIQUE_PATTERN.fullmatch(v):
            raise ValueError(
                "prefix must contain only letters, numbers, dashes, and/or underscores"
            )
        return v


class Settings(BaseSettings):
    """Root settings class with all nested configurations.

    Usage:
        from wphelpers.config import get_settings

        settings = get_settings()
        prefix = settings.notifier.prefix
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    notifier: NotifierSettings = Field(default_factory=NotifierSettings)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Returns:
        The singleton Settings instance with all configuration loaded.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
