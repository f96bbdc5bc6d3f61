"""Metadata lookups returning results."""

from wphelpers.meta.meta import EMPTY_VALUE, INVALID_TYPE, get_meta_string
from wphelpers.meta.store import InMemoryMetaStore, MetaStore

__all__ = [
    "EMPTY_VALUE",
    "INVALID_TYPE",
    "InMemoryMetaStore",
    "MetaStore",
    "get_meta_string",
]
