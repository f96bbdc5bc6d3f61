"""User-facing notices.

A notice carries a message and a severity, and decides for itself who may
see it (audience) and where (screens).
"""

import hashlib
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from wphelpers.errors import InvalidArgument
from wphelpers.utils.text import clean_inline_html, strip_tags

__all__ = [
    "ALLOWED_TAGS",
    "Actor",
    "Notice",
    "Severity",
    "error",
    "info",
    "success",
    "warning",
]

ALLOWED_TAGS = ("abbr", "b", "em", "i", "strong")


class Severity(str, Enum):
    """Severity of a notice. Also used as the notice's CSS modifier."""

    ERROR = "error"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"

    @classmethod
    def parse(cls, value: "Severity | str") -> "Severity":
        """Return the matching severity, falling back to INFO."""
        try:
            return cls(value)
        except ValueError:
            return cls.INFO


@dataclass(frozen=True)
class Actor:
    """The user a notice is being rendered for."""

    user_id: int
    capabilities: frozenset[str] = frozenset()

    def can(self, capability: str) -> bool:
        return capability in self.capabilities


def _clean_text(text: Any) -> str:
    """Keep the allowed inline tags. The visible text must not be empty."""
    cleaned = clean_inline_html(text, ALLOWED_TAGS) if isinstance(text, str) else ""
    if strip_tags(cleaned) == "":
        raise InvalidArgument("Parameter text must not be empty.")
    return cleaned


def _merge(current: tuple[str, ...], extra: tuple[Any, ...]) -> tuple[Any, ...]:
    """Append non-empty values that are not already present."""
    merged = list(current)
    for value in extra:
        if value and value not in merged:
            merged.append(value)
    return tuple(merged)


@dataclass(frozen=True)
class Notice:
    """Immutable notice descriptor.

    Attributes:
        severity: error, info, success or warning. Anything else becomes info.
        text: Message shown to the user. Only a few inline tags survive
            cleaning and the cleaned text must not be empty.
        classes: Extra CSS classes added after "notice notice-<severity>".
        user_ids: When non-empty, only these users see the notice.
        capabilities: When non-empty (and user_ids is empty), only users
            holding at least one of these capabilities see the notice.
        include: Screens the notice is limited to.
        exclude: Screens the notice is hidden on. Ignored when include is set.
    """

    severity: Severity
    text: str
    classes: tuple[str, ...] = ()
    user_ids: frozenset[int] = frozenset()
    capabilities: frozenset[str] = frozenset()
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "severity", Severity.parse(self.severity))
        object.__setattr__(self, "text", _clean_text(self.text))
        object.__setattr__(self, "classes", _merge((), tuple(self.classes)))
        object.__setattr__(self, "user_ids", frozenset(self.user_ids))
        object.__setattr__(self, "capabilities", frozenset(self.capabilities))
        object.__setattr__(self, "include", _merge((), tuple(self.include)))
        object.__setattr__(self, "exclude", _merge((), tuple(self.exclude)))

    @classmethod
    def create(cls, severity: Severity | str, text: str, *values: Any) -> "Notice":
        """Create a notice from a printf-style message.

        The message is cleaned before ``values`` are substituted into it.
        """
        cleaned = _clean_text(text)
        return cls(severity, cleaned % values if values else cleaned)

    @property
    def class_list(self) -> tuple[str, ...]:
        return _merge(("notice", f"notice-{self.severity.value}"), self.classes)

    def get_class_list(self) -> str:
        return " ".join(self.class_list)

    @property
    def digest(self) -> str:
        """md5 of classes, severity and text. Equal notices share a digest."""
        source = "".join(self.class_list) + self.severity.value + self.text
        return hashlib.md5(source.encode("utf-8")).hexdigest()

    # ============================================================================
    # Fluent modifiers
    # ============================================================================

    def with_classes(self, *classes: str) -> "Notice":
        return replace(self, classes=_merge(self.classes, classes))

    def show_on_screen(self, *screen_ids: str) -> "Notice":
        """Limit this notice to one or more screens."""
        return replace(self, include=_merge(self.include, screen_ids))

    def hide_on_screen(self, *screen_ids: str) -> "Notice":
        """Exclude this notice from one or more screens."""
        return replace(self, exclude=_merge(self.exclude, screen_ids))

    def for_users(self, *user_ids: int) -> "Notice":
        return replace(self, user_ids=self.user_ids | set(user_ids))

    def for_capabilities(self, *capabilities: str) -> "Notice":
        return replace(
            self, capabilities=self.capabilities | {c for c in capabilities if c}
        )

    # ============================================================================
    # Visibility
    # ============================================================================

    def exists_on_screen(self, screen_id: str) -> bool:
        """Should this notice be rendered on a given screen?"""
        if self.include:
            return screen_id in self.include
        if self.exclude:
            return screen_id not in self.exclude
        return True

    def is_renderable(self, actor: Actor | None = None) -> bool:
        """May ``actor`` see this notice?

        An explicit user list takes precedence over the capability list.
        Without an actor, only unrestricted notices are renderable.
        """
        if self.user_ids:
            return actor is not None and actor.user_id in self.user_ids
        if self.capabilities:
            return actor is not None and any(actor.can(c) for c in self.capabilities)
        return True


def error(text: str, *values: Any) -> Notice:
    """Error notice."""
    return Notice.create(Severity.ERROR, text, *values)


def info(text: str, *values: Any) -> Notice:
    """Information notice."""
    return Notice.create(Severity.INFO, text, *values)


def success(text: str, *values: Any) -> Notice:
    """Success notice."""
    return Notice.create(Severity.SUCCESS, text, *values)


def warning(text: str, *values: Any) -> Notice:
    """Warning notice."""
    return Notice.create(Severity.WARNING, text, *values)
