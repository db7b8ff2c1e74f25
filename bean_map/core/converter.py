"""Bidirectional bean/map converter.

BeanConverter bundles an encoder and a decoder sharing one configuration.
The module-level functions use a default-configured converter.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from bean_map.core.config import ConverterConfig
from bean_map.mapping.decoder import BeanDecoder
from bean_map.mapping.encoder import BeanEncoder
from bean_map.mapping.result import ConversionResult

T = TypeVar("T")


class BeanConverter:
    """Converts record objects to dicts and back.

    Args:
        config: Converter configuration. Defaults to ``ConverterConfig()``.
    """

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self.config = config or ConverterConfig()
        self._encoder = BeanEncoder(self.config)
        self._decoder = BeanDecoder(self.config)

    def encode(self, bean: Any) -> dict[str, Any]:
        return self._encoder.encode(bean)

    def encode_with_diagnostics(self, bean: Any) -> ConversionResult[dict[str, Any]]:
        return self._encoder.encode_with_diagnostics(bean)

    def encode_many(self, beans: list[Any]) -> list[dict[str, Any]]:
        return self._encoder.encode_many(beans)

    def decode(self, target_class: type[T], data: Mapping[str, Any]) -> T:
        return self._decoder.decode(target_class, data)

    def decode_with_diagnostics(
        self,
        target_class: type[T],
        data: Mapping[str, Any],
    ) -> ConversionResult[T]:
        return self._decoder.decode_with_diagnostics(target_class, data)

    def decode_many(self, target_class: type[T], rows: list[Mapping[str, Any]]) -> list[T]:
        return self._decoder.decode_many(target_class, rows)


_default = BeanConverter()


def object_to_map(bean: Any) -> dict[str, Any]:
    """Encode *bean* with the default converter."""
    return _default.encode(bean)


def map_to_object(target_class: type[T], data: Mapping[str, Any]) -> T:
    """Decode *data* into a new *target_class* with the default converter.

    Raises:
        ConstructionError: If *target_class* has no usable zero-argument
            constructor.
    """
    return _default.decode(target_class, data)
