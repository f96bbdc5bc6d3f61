"""Notice registry.

A Notifier collects the notices raised while handling a request and decides
which of them to show on a given screen to a given actor. Notices can also
travel across a redirect in the query string, under argument names prefixed
with the notifier's unique identifier.
"""

from collections.abc import Iterable, Mapping
from urllib.parse import parse_qs, parse_qsl, quote, urlencode, urlsplit, urlunsplit

from wphelpers.config import UNIQUE_PATTERN
from wphelpers.errors import InvalidArgument
from wphelpers.notifier.notice import Actor, Notice, Severity
from wphelpers.utils.logging import get_logger

logger = get_logger(__name__)


class Notifier:
    """Registry of notices for a single request.

    Attributes:
        unique: Prefix for the query arguments recognized by this notifier.
    """

    def __init__(self, unique: str):
        if not isinstance(unique, str) or not UNIQUE_PATTERN.fullmatch(unique):
            raise InvalidArgument(
                "Value must be a non-empty string containing only letters, numbers, "
                f"dashes, and/or underscores. A value of ({unique!r}) was provided."
            )
        self.unique = unique
        self._notices: dict[str, Notice] = {}

    @property
    def recognized_query_args(self) -> list[str]:
        """Names of the query arguments that carry notices, one per severity."""
        return [f"{self.unique}-{severity.value}" for severity in Severity]

    @property
    def notices(self) -> list[Notice]:
        return list(self._notices.values())

    def notify(self, notice: Notice) -> "Notifier":
        """Register a notice. Identical notices are only registered once.

        Returns:
            Self for method chaining
        """
        if not isinstance(notice, Notice):
            raise InvalidArgument(
                f"Only notices may be registered. A value with a type of {type(notice).__name__!r} was passed."
            )
        self._notices[notice.digest] = notice
        logger.debug(
            "Registered notice", severity=notice.severity.value, digest=notice.digest
        )
        return self

    def with_query(self, query: Mapping[str, str | Iterable[str]] | str) -> "Notifier":
        """Register notices carried by query arguments.

        Args:
            query: Parsed query arguments, or a raw query string.

        Returns:
            Self for method chaining
        """
        if isinstance(query, str):
            query = parse_qs(query.lstrip("?"))

        prefix = f"{self.unique}-"
        for key in self.recognized_query_args:
            values = query.get(key)
            if not values:
                continue
            if isinstance(values, str):
                values = [values]
            severity = key[len(prefix) :]
            for value in values:
                if not value:
                    continue
                try:
                    self.notify(Notice(severity, value))
                except InvalidArgument as e:
                    logger.debug("Skipping query notice", key=key, reason=str(e))
        return self

    def filter_query_args(self, args: Iterable[str] | None) -> list[str]:
        """Add this notifier's query arguments to a list of removable arguments."""
        if args is None or isinstance(args, str):
            return list(self.recognized_query_args)
        return [*args, *self.recognized_query_args]

    def redirect_url(self, url: str, notice: Notice) -> str:
        """Return ``url`` with ``notice`` encoded in its query string."""
        key = f"{self.unique}-{notice.severity.value}"
        parts = urlsplit(url)
        params = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != key]
        params.append((key, notice.text))
        return urlunsplit(parts._replace(query=urlencode(params, quote_via=quote)))

    def notices_for(self, screen_id: str, actor: Actor | None = None) -> list[Notice]:
        """Registered notices visible on ``screen_id`` and renderable for ``actor``."""
        return [
            notice
            for notice in self._notices.values()
            if notice.exists_on_screen(screen_id) and notice.is_renderable(actor)
        ]

    def has_notices_for(self, screen_id: str) -> bool:
        """Is at least one notice registered for a given screen?"""
        return any(notice.exists_on_screen(screen_id) for notice in self._notices.values())

    def __len__(self) -> int:
        return len(self._notices)
