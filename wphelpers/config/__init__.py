"""Configuration module for wphelpers.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from wphelpers.config import get_settings

    settings = get_settings()

    # Access logging settings
    level = settings.logging.log_level

    # Access the query string prefix used by notifiers
    prefix = settings.notifier.prefix
"""

from wphelpers.config.settings import (
    UNIQUE_PATTERN,
    LoggingSettings,
    NotifierSettings,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "UNIQUE_PATTERN",
    "LoggingSettings",
    "NotifierSettings",
    "Settings",
    "get_settings",
    "reset_settings",
]
