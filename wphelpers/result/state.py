"""Result states.

A result is in exactly one of three states: undefined (no verdict yet),
passed, or failed with a code that names the reason for the failure.
"""

from dataclasses import dataclass

from wphelpers.errors import InvalidArgument

__all__ = [
    "DEFAULT_FAILURE_CODE",
    "FAILED",
    "PASSED",
    "UNDEFINED",
    "Failed",
    "Passed",
    "State",
    "Undefined",
    "coerce_state",
]

DEFAULT_FAILURE_CODE = "failed"
RESERVED_CODES = frozenset({"passed", "undefined"})


@dataclass(frozen=True)
class Undefined:
    """No verdict has been reached."""

    @property
    def label(self) -> str | None:
        return None

    def __str__(self) -> str:
        return "undefined"


@dataclass(frozen=True)
class Passed:
    """The action succeeded."""

    @property
    def label(self) -> str | None:
        return "passed"

    def __str__(self) -> str:
        return "passed"


@dataclass(frozen=True)
class Failed:
    """The action failed.

    Attributes:
        code: Machine readable reason for the failure. Never blank and never
            one of the names reserved for the other two states.
    """

    code: str = DEFAULT_FAILURE_CODE

    def __post_init__(self):
        if not isinstance(self.code, str) or self.code.strip() == "":
            raise InvalidArgument(
                f"Failure code must be a non-empty string. A value of {self.code!r} was provided."
            )
        if self.code in RESERVED_CODES:
            raise InvalidArgument(
                f"Failure code {self.code!r} is reserved for a non-failure state."
            )

    @property
    def label(self) -> str | None:
        return self.code

    def __str__(self) -> str:
        return self.code


State = Undefined | Passed | Failed

UNDEFINED = Undefined()
PASSED = Passed()
FAILED = Failed()


def coerce_state(value: "State | str | None") -> State:
    """Convert a loosely typed state into a State.

    ``None`` and ``"undefined"`` mean undefined, ``"passed"`` means passed and
    any other string is taken as a failure code.

    Raises:
        InvalidArgument: If the value is a blank string or not a state at all.
    """
    if value is None:
        return UNDEFINED
    if isinstance(value, (Undefined, Passed, Failed)):
        return value
    if isinstance(value, str):
        if value.strip() == "":
            raise InvalidArgument(
                "Parameter state must not be an empty or whitespace-only string."
            )
        if value == "undefined":
            return UNDEFINED
        if value == "passed":
            return PASSED
        return Failed(value)
    raise InvalidArgument(
        f"Parameter state has an unrecognized value of type {type(value).__name__!r}."
    )
