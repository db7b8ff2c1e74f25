"""Bean plan compilation.

Scans a record type once via the TypeIntrospector and classifies its
methods into readers and writers by naming convention and arity.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType

from bean_map.core.enums import NamingStyle
from bean_map.core.introspect import MethodDescriptor, TypeIntrospector
from bean_map.core.naming import parse_reader, parse_writer
from bean_map.mapping.matching import accepted_types
from bean_map.mapping.plan import BeanPlan, ReaderPlan, WriterPlan

_introspector = TypeIntrospector()


def _as_reader(method: MethodDescriptor, style: NamingStyle) -> ReaderPlan | None:
    if method.arity != 0:
        return None
    parsed = parse_reader(method.name, style)
    if parsed is None:
        return None
    kind, attribute = parsed
    return ReaderPlan(attribute=attribute, method=method, kind=kind)


def _as_writer(method: MethodDescriptor, style: NamingStyle) -> WriterPlan | None:
    if method.arity != 1:
        return None
    attribute = parse_writer(method.name, style)
    if attribute is None:
        return None
    param = next(p for p in method.parameters if p.required)
    if not param.positional:
        return None
    return WriterPlan(
        attribute=attribute,
        method=method,
        param_types=accepted_types(param.annotation),
    )


@lru_cache(maxsize=256)
def compile_plan(target_class: type, naming_style: NamingStyle = NamingStyle.CAMEL) -> BeanPlan:
    """Compile the reader/writer registry of *target_class*.

    Args:
        target_class: The record type to scan.
        naming_style: Accessor naming convention to recognise.

    Returns:
        An immutable BeanPlan, cached per (class, style).
    """
    readers: list[ReaderPlan] = []
    writers: dict[str, list[WriterPlan]] = {}

    for method in _introspector.describe(target_class):
        reader = _as_reader(method, naming_style)
        if reader is not None:
            readers.append(reader)
            continue
        writer = _as_writer(method, naming_style)
        if writer is not None:
            writers.setdefault(writer.method_name, []).append(writer)

    return BeanPlan(
        target_class=target_class,
        naming_style=naming_style,
        readers=tuple(readers),
        writers=MappingProxyType(
            {name: tuple(overloads) for name, overloads in writers.items()}
        ),
    )
