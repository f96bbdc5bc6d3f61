"""Metadata lookups that report their outcome as results."""

from typing import Any

from wphelpers.errors import InvalidArgument
from wphelpers.meta.store import MetaStore
from wphelpers.result import PASSED, Failed, Result, ResultOfString
from wphelpers.utils.logging import get_logger

logger = get_logger(__name__)

EMPTY_VALUE = "emptyValue"
INVALID_TYPE = "invalidType"


def _to_string(value: Any) -> str | None:
    """Return the string form of a scalar, or None for composite values."""
    if isinstance(value, str):
        return value
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, (int, float)):
        return str(value)
    return None


def get_meta_string(
    store: MetaStore, object_type: str, object_id: int, key: str = ""
) -> ResultOfString:
    """Retrieve a meta value as a string.

    The result passes when the key exists and holds a non-empty string or a
    number. Numbers are converted with ``str()``.

    Args:
        store: Store to read from.
        object_type: Type of object that owns the meta (post, comment, term, user).
        object_id: Numeric id of the object.
        key: The meta key.

    Returns:
        A passed result carrying the value, or a failed result with the code
        "emptyValue" (missing, null or empty) or "invalidType" (composite
        value) and an empty payload.

    Raises:
        InvalidArgument: If object_type is empty or object_id is not positive.
    """
    if not object_type:
        raise InvalidArgument("Parameter object_type must not be empty.")
    if isinstance(object_id, bool) or not isinstance(object_id, int) or object_id < 1:
        raise InvalidArgument(
            f"Parameter object_id must be a positive integer. A value of {object_id!r} was provided."
        )

    action = (
        f"Requesting string for meta key [{key}] from [{object_type}] "
        f"object having id [{object_id}]"
    )

    value = store.get(object_type, object_id, key)
    text = _to_string(value) if value is not None else ""

    if text is None:
        logger.debug(
            "Meta value has an invalid type",
            object_type=object_type,
            object_id=object_id,
            key=key,
            value_type=type(value).__name__,
        )
        return ResultOfString(
            action,
            Failed(INVALID_TYPE),
            "",
            [Result(f"The value stored for this key has a type of [{type(value).__name__}]")],
        )

    if text == "":
        logger.debug(
            "Meta value is empty", object_type=object_type, object_id=object_id, key=key
        )
        return ResultOfString(
            action,
            Failed(EMPTY_VALUE),
            "",
            [
                Result(
                    "Either the requested key does not exist or has been saved with a "
                    "value of an empty string or null"
                )
            ],
        )

    return ResultOfString(action, PASSED, text)
