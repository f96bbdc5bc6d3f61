"""Plain dict conversion for result trees."""

from collections.abc import Mapping
from typing import Any

from wphelpers.errors import InvalidArgument
from wphelpers.result.result import Result, ResultOfArray, ResultOfString
from wphelpers.result.state import PASSED, UNDEFINED, Failed, Passed, Undefined

RESULT_KINDS: dict[str, type[Result]] = {
    "result": Result,
    "string": ResultOfString,
    "array": ResultOfArray,
}


def _kind_of(result: Result) -> str:
    for kind, cls in RESULT_KINDS.items():
        if type(result) is cls:
            return kind
    return "result"


def result_to_dict(result: Result) -> dict[str, Any]:
    """Convert a result tree into nested dicts."""
    if isinstance(result.state, Undefined):
        state = "undefined"
    elif isinstance(result.state, Passed):
        state = "passed"
    else:
        state = "failed"

    data: dict[str, Any] = {
        "action": result.action,
        "state": state,
        "code": result.code,
        "payload": result.payload,
        "log": [result_to_dict(child) for child in result.log],
    }
    kind = _kind_of(result)
    if kind != "result":
        data["kind"] = kind
    return data


def result_from_dict(data: Mapping[str, Any]) -> Result:
    """Build a result tree from nested dicts.

    Only ``action`` is required. ``state`` is one of "undefined", "passed" or
    "failed"; a failure may carry a ``code``.

    Raises:
        InvalidArgument: If the document is malformed.
    """
    if not isinstance(data, Mapping):
        raise InvalidArgument(
            f"Result document must be a mapping, not {type(data).__name__!r}."
        )

    state_name = data.get("state") or "undefined"
    if state_name == "undefined":
        state = UNDEFINED
    elif state_name == "passed":
        state = PASSED
    elif state_name == "failed":
        state = Failed(data.get("code") or "failed")
    else:
        raise InvalidArgument(
            f"Unrecognized state {state_name!r}. Use undefined, passed or failed."
        )

    kind = data.get("kind", "result")
    if kind not in RESULT_KINDS:
        raise InvalidArgument(
            f"Unrecognized result kind {kind!r}. Use one of {sorted(RESULT_KINDS)}."
        )
    cls = RESULT_KINDS[kind]

    log = [result_from_dict(child) for child in data.get("log") or []]
    kwargs: dict[str, Any] = {"state": state, "log": log}
    if "payload" in data and data["payload"] is not None:
        kwargs["payload"] = data["payload"]

    return cls(data.get("action", ""), **kwargs)
