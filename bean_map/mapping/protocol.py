"""Row mapper protocol.

Anything that builds records from string-keyed rows can stand in for
BeanMapper: a batch of rows maps element-wise, in order.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Mapper(Protocol[T]):
    """Builds records of type T from row dicts."""

    def map_one(self, row: dict[str, Any]) -> T:
        """Build one record; keys without a writer are ignored."""
        ...

    def map_many(self, rows: list[dict[str, Any]]) -> list[T]:
        """Build one record per row, preserving row order."""
        ...
