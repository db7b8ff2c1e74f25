"""Mapping layer - transform beans into dicts and dicts into beans."""

from __future__ import annotations

from bean_map.mapping.builder import compile_plan
from bean_map.mapping.decoder import BeanDecoder
from bean_map.mapping.encoder import BeanEncoder
from bean_map.mapping.model import BeanMapper
from bean_map.mapping.plan import BeanPlan, ReaderPlan, WriterPlan
from bean_map.mapping.result import ConversionResult, Diagnostic

__all__ = [
    "BeanEncoder",
    "BeanDecoder",
    "BeanMapper",
    "compile_plan",
    "BeanPlan",
    "ReaderPlan",
    "WriterPlan",
    "ConversionResult",
    "Diagnostic",
]
