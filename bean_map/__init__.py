"""BeanMap - convert accessor-convention records to dicts and back."""

from __future__ import annotations

from bean_map.core.config import ConverterConfig
from bean_map.core.converter import BeanConverter, map_to_object, object_to_map
from bean_map.core.enums import DiagnosticKind, NamingStyle, ReaderKind, TypeMatch
from bean_map.core.exceptions import (
    AccessError,
    BeanMapError,
    ConstructionError,
    ConversionFailedError,
)
from bean_map.core.introspect import MethodDescriptor, TypeIntrospector
from bean_map.mapping.builder import compile_plan
from bean_map.mapping.decoder import BeanDecoder
from bean_map.mapping.encoder import BeanEncoder
from bean_map.mapping.model import BeanMapper
from bean_map.mapping.result import ConversionResult, Diagnostic

__all__ = [
    # Converter
    "BeanConverter",
    "object_to_map",
    "map_to_object",
    # Config
    "ConverterConfig",
    # Encoding / decoding
    "BeanEncoder",
    "BeanDecoder",
    "BeanMapper",
    # Results
    "ConversionResult",
    "Diagnostic",
    # Introspection
    "TypeIntrospector",
    "MethodDescriptor",
    "compile_plan",
    # Enums
    "NamingStyle",
    "TypeMatch",
    "ReaderKind",
    "DiagnosticKind",
    # Exceptions
    "BeanMapError",
    "ConstructionError",
    "AccessError",
    "ConversionFailedError",
]
