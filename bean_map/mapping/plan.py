"""Bean mapping plan data classes.

Frozen dataclasses representing the compiled reader/writer registry of a
record type. Built once per (type, naming style) by ``compile_plan``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from bean_map.core.enums import NamingStyle, ReaderKind
from bean_map.core.introspect import MethodDescriptor


@dataclass(frozen=True)
class ReaderPlan:
    """A zero-argument reader (``getX`` or ``isX``)."""

    attribute: str
    method: MethodDescriptor
    kind: ReaderKind

    @property
    def method_name(self) -> str:
        return self.method.name


@dataclass(frozen=True)
class WriterPlan:
    """One overload of a single-argument writer (``setX``)."""

    attribute: str
    method: MethodDescriptor
    param_types: tuple[Any, ...]  # accepted runtime types, see matching.accepted_types

    @property
    def method_name(self) -> str:
        return self.method.name


@dataclass(frozen=True)
class BeanPlan:
    """Compiled reader/writer registry for a record type."""

    target_class: type
    naming_style: NamingStyle
    readers: tuple[ReaderPlan, ...] = ()
    # method name -> overloads, read-only
    writers: Mapping[str, tuple[WriterPlan, ...]] = field(
        default_factory=lambda: MappingProxyType({}),
        hash=False,
    )

    def writers_for(self, method_name: str) -> tuple[WriterPlan, ...]:
        return self.writers.get(method_name, ())

    @property
    def readable(self) -> list[str]:
        """Attribute names with a reader, in enumeration order."""
        return list(dict.fromkeys(r.attribute for r in self.readers))

    @property
    def writable(self) -> list[str]:
        """Attribute names with at least one writer."""
        return list(dict.fromkeys(w[0].attribute for w in self.writers.values()))
