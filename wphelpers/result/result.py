"""Result types.

A Result records the outcome of a named action: a state, an optional payload
and an ordered log of child results describing the sub-steps taken. Results
are immutable; every composition method returns a new instance.

Example:
    lookup = Result("Look up the weather").log_message("Asked the sky").pass_()
    report = Result("Publish the forecast").merge(lookup)
    print(report.to_markdown())
"""

import dataclasses
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, TypeVar

from wphelpers.errors import InvalidArgument, InvalidState, TypeMismatch
from wphelpers.result.state import (
    FAILED,
    PASSED,
    Failed,
    Passed,
    State,
    Undefined,
    coerce_state,
)
from wphelpers.utils.text import strip_tags

__all__ = [
    "MARKDOWN_INDENT",
    "TEXT_INDENT",
    "Result",
    "ResultOfArray",
    "ResultOfString",
]

T = TypeVar("T")

TEXT_INDENT = 4
MARKDOWN_INDENT = 2


@dataclass(frozen=True)
class Result(Generic[T]):
    """Immutable outcome of a named action.

    Attributes:
        action: Human-readable name of the action. Must not be empty.
        state: Undefined, Passed or Failed(code). Strings are accepted and
            converted (see ``coerce_state``).
        payload: The value produced by the action, if any.
        log: Direct child results in the order they were recorded.
    """

    action: str
    state: State = field(default_factory=Undefined)
    payload: T | None = None
    log: tuple["Result", ...] = ()

    payload_types: ClassVar[tuple[type, ...] | None] = None

    def __post_init__(self):
        if not isinstance(self.action, str) or self.action == "":
            raise InvalidArgument("Parameter action must be a non-empty string.")

        object.__setattr__(self, "state", coerce_state(self.state))

        if isinstance(self.log, (str, bytes)) or not isinstance(self.log, Iterable):
            raise InvalidArgument(
                "Parameter log must be an iterable that contains only results."
            )
        children = tuple(self.log)
        for child in children:
            if not isinstance(child, Result):
                raise InvalidArgument(
                    "Parameter log must contain only instances of Result. "
                    f"A value with a type of {type(child).__name__!r} was passed."
                )
        object.__setattr__(self, "log", children)

        self._check_payload()

    def _check_payload(self) -> None:
        if self.payload_types is None:
            return
        if not isinstance(self.payload, self.payload_types):
            expected = " or ".join(t.__name__ for t in self.payload_types)
            raise TypeMismatch(
                f"{type(self).__name__} requires a payload of type {expected}. "
                f"A value with a type of {type(self.payload).__name__!r} was passed."
            )

    # ============================================================================
    # State queries
    # ============================================================================

    def passed(self) -> bool:
        """Did the action pass?"""
        return isinstance(self.state, Passed)

    def failed(self, code: str | None = None) -> bool:
        """Did the action fail?

        Args:
            code: When given, only a failure with exactly this code counts.
        """
        if not isinstance(self.state, Failed):
            return False
        return code is None or self.state.code == code

    def undefined(self) -> bool:
        """Is the outcome still unknown?"""
        return isinstance(self.state, Undefined)

    @property
    def code(self) -> str | None:
        """The failure code, or None when the result has not failed."""
        return self.state.code if isinstance(self.state, Failed) else None

    def count(self) -> int:
        """Number of direct children in the log. Nested entries are not counted."""
        return len(self.log)

    def to_value(self) -> T | None:
        return self.payload

    def __len__(self) -> int:
        return len(self.log)

    # len() would otherwise make results without children falsy
    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator["Result"]:
        return iter(self.log)

    # ============================================================================
    # Composition
    # ============================================================================

    def log_message(self, message: str, *args: Any) -> "Result[T]":
        """Return a copy with a leaf result appended to the log.

        Args:
            message: printf-style template. Markup is stripped after formatting.
            *args: Values substituted into ``message``.

        Raises:
            InvalidArgument: If the arguments do not fit the template or the
                formatted message is empty.
        """
        try:
            text = str(message) % args
        except (TypeError, ValueError) as e:
            raise InvalidArgument(f"Cannot format log message {message!r}: {e}") from e
        text = strip_tags(text)
        if text == "":
            raise InvalidArgument("Log message must not be empty.")
        return dataclasses.replace(self, log=(*self.log, Result(text)))

    def merge(self, other: "Result") -> "Result[T]":
        """Return a copy that records ``other`` and takes on its verdict.

        Raises:
            InvalidArgument: If ``other`` is not a result.
            InvalidState: If ``other`` has no verdict yet.
        """
        if not isinstance(other, Result):
            raise InvalidArgument(
                f"Only results may be merged. A value with a type of {type(other).__name__!r} was passed."
            )
        if other.undefined():
            raise InvalidState(
                f"Cannot merge result {other.action!r} because its state is undefined."
            )
        state = PASSED if other.passed() else FAILED
        return dataclasses.replace(self, state=state, log=(*self.log, other))

    def pass_(self, message: str | None = None, *args: Any) -> "Result[T]":
        """Return a passed copy, optionally logging ``message`` first."""
        result = self.log_message(message, *args) if message is not None else self
        return dataclasses.replace(result, state=PASSED)

    def fail(
        self, code: str | None = None, message: str | None = None, *args: Any
    ) -> "Result[T]":
        """Return a failed copy, optionally logging ``message`` first.

        Args:
            code: Failure code. Defaults to the generic "failed".
            message: Optional printf-style message to log.
        """
        state = FAILED if code is None else Failed(code)
        result = self.log_message(message, *args) if message is not None else self
        return dataclasses.replace(result, state=state)

    def with_payload(self, payload: T) -> "Result[T]":
        """Return a copy carrying a different payload."""
        return dataclasses.replace(self, payload=payload)

    # ============================================================================
    # Rendering
    # ============================================================================

    def _title(self) -> str:
        label = self.state.label
        return self.action if label is None else f"{self.action} ({label})"

    def to_text(self, depth: int = 1) -> str:
        """Render as plain text with numbered children.

        Args:
            depth: Nesting level of this result's children. Each level is
                indented by four spaces.
        """
        lines = [self._title()]
        indent = " " * (TEXT_INDENT * depth)
        for number, child in enumerate(self.log, start=1):
            lines.append(f"{indent}{number}. {child.to_text(depth + 1)}")
        return "\n".join(lines)

    def to_markdown(self, depth: int = 1) -> str:
        """Render as a markdown bullet list.

        Args:
            depth: Nesting level of this result's children. Each level is
                indented by two spaces.
        """
        lines = [self._title()]
        indent = " " * (MARKDOWN_INDENT * depth)
        for child in self.log:
            lines.append(f"{indent}* {child.to_markdown(depth + 1)}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_text()


@dataclass(frozen=True)
class ResultOfString(Result[str]):
    """Result whose payload is always a string."""

    payload: str = ""

    payload_types: ClassVar[tuple[type, ...] | None] = (str,)


@dataclass(frozen=True)
class ResultOfArray(Result[list]):
    """Result whose payload is always a list (or a mapping).

    The payload is mutable and shared, not copied, between a result and the
    copies its composition methods return. Such results are not hashable.
    """

    payload: list | dict = field(default_factory=list)

    payload_types: ClassVar[tuple[type, ...] | None] = (list, dict)
