"""Result value types

This package provides:
- Result states (undefined, passed, failed with a code)
- Immutable Result trees with text and markdown rendering
- Typed variants that constrain the payload
- Conversion from multi-error collections
- Plain dict serialization
"""

from .from_error import ErrorCollection, result_from_error
from .result import Result, ResultOfArray, ResultOfString
from .serialize import result_from_dict, result_to_dict
from .state import (
    DEFAULT_FAILURE_CODE,
    FAILED,
    PASSED,
    UNDEFINED,
    Failed,
    Passed,
    State,
    Undefined,
    coerce_state,
)

__all__ = [
    "DEFAULT_FAILURE_CODE",
    "FAILED",
    "PASSED",
    "UNDEFINED",
    "ErrorCollection",
    "Failed",
    "Passed",
    "Result",
    "ResultOfArray",
    "ResultOfString",
    "State",
    "Undefined",
    "coerce_state",
    "result_from_dict",
    "result_from_error",
    "result_to_dict",
]
