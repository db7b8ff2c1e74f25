"""Row-to-bean mapper.

Adapts BeanDecoder to the Mapper protocol so record types can be built
from row dicts, optionally renaming columns first.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from bean_map.core.config import ConverterConfig
from bean_map.mapping.decoder import BeanDecoder

T = TypeVar("T")


class BeanMapper(Generic[T]):
    """Row-to-bean mapper.

    Args:
        target_class: The record type to construct from row data.
        config: Converter configuration.
        aliases: Optional column-name to attribute-name mapping.
    """

    def __init__(
        self,
        target_class: type[T],
        config: ConverterConfig | None = None,
        aliases: dict[str, str] | None = None,
    ) -> None:
        self._target_class = target_class
        self._decoder = BeanDecoder(config)
        self._aliases = aliases

    def _apply_aliases(self, row: dict[str, Any]) -> dict[str, Any]:
        """Apply column aliases to the row."""
        if not self._aliases:
            return row
        return {self._aliases.get(key, key): value for key, value in row.items()}

    def map_one(self, row: dict[str, Any]) -> T:
        """Map a single row to a target_class instance."""
        return self._decoder.decode(self._target_class, self._apply_aliases(row))

    def map_many(self, rows: list[dict[str, Any]]) -> list[T]:
        """Map all rows via map_one."""
        return [self.map_one(row) for row in rows]
