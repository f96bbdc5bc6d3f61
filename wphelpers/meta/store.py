"""Key/value stores consulted by metadata lookups."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MetaStore(Protocol):
    """Common interface for metadata stores.

    Values are addressed by object type (post, term, user, ...), the numeric
    id of the object and the meta key.
    """

    def get(self, object_type: str, object_id: int, key: str) -> Any:
        """Return the stored value, or None when the key does not exist."""
        ...


class InMemoryMetaStore:
    """MetaStore backed by a dict."""

    def __init__(self):
        self._values: dict[tuple[str, int, str], Any] = {}

    def set(self, object_type: str, object_id: int, key: str, value: Any) -> None:
        self._values[(object_type, object_id, key)] = value

    def delete(self, object_type: str, object_id: int, key: str) -> None:
        self._values.pop((object_type, object_id, key), None)

    def get(self, object_type: str, object_id: int, key: str) -> Any:
        return self._values.get((object_type, object_id, key))
