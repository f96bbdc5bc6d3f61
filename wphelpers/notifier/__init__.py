"""Notices and the per-request notice registry."""

from wphelpers.notifier.notice import (
    ALLOWED_TAGS,
    Actor,
    Notice,
    Severity,
    error,
    info,
    success,
    warning,
)
from wphelpers.notifier.notifier import Notifier

__all__ = [
    "ALLOWED_TAGS",
    "Actor",
    "Notice",
    "Notifier",
    "Severity",
    "error",
    "info",
    "success",
    "warning",
]
