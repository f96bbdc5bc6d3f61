"""Conversion of multi-error collections into results.

Errors are grouped by code. A code keeps the position at which it was first
added, so messages added later under an existing code are rendered next to
that code's earlier messages instead of in overall insertion order.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from wphelpers.errors import InvalidArgument
from wphelpers.result.result import Result
from wphelpers.result.state import FAILED, UNDEFINED

__all__ = ["ErrorCollection", "result_from_error"]


class ErrorCollection:
    """Ordered collection of error messages keyed by code.

    Example:
        errors = ErrorCollection(404, "Not Found")
        errors.add(401, "Unauthorized")
        result = result_from_error("Fetching page", errors)
    """

    def __init__(self, code: str | int | None = None, message: str = ""):
        self._errors: dict[str | int, list[str]] = {}
        if code is not None and code != "":
            self.add(code, message)

    def add(self, code: str | int, message: str) -> "ErrorCollection":
        """Record ``message`` under ``code``.

        Returns:
            Self for method chaining
        """
        if code is None or code == "":
            raise InvalidArgument("Error code must not be empty.")
        self._errors.setdefault(code, []).append(message)
        return self

    @property
    def errors(self) -> dict[str | int, list[str]]:
        return {code: list(messages) for code, messages in self._errors.items()}

    @property
    def codes(self) -> list[str | int]:
        return list(self._errors)

    def messages(self, code: str | int | None = None) -> list[str]:
        """Messages for one code, or all messages when ``code`` is None."""
        if code is None:
            return [m for messages in self._errors.values() for m in messages]
        return list(self._errors.get(code, []))

    def has_errors(self) -> bool:
        return bool(self._errors)

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._errors.values())


def result_from_error(
    action: str,
    errors: "ErrorCollection | Mapping[Any, Sequence[str]] | None" = None,
    payload: Any = None,
) -> Result:
    """Build a result from a collection of errors.

    Args:
        action: Name of the action that produced the errors.
        errors: Messages keyed by error code. An ErrorCollection is accepted
            as well as a plain mapping.
        payload: Optional payload for the result.

    Returns:
        An undefined result when there are no errors, otherwise a failed
        result with one child per message, labelled "<code> - <message>".
    """
    if isinstance(errors, ErrorCollection):
        errors = errors.errors

    if not errors:
        return Result(action, UNDEFINED, payload)

    log = []
    for code, messages in errors.items():
        if isinstance(messages, str):
            messages = [messages]
        for message in messages:
            log.append(Result(f"{code} - {message}"))

    return Result(action, FAILED, payload, log)
