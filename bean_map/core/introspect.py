"""Type introspection.

Turns a class into an ordered sequence of method descriptors. Order is the
declaration order of the class hierarchy walked base-first; an override keeps
the position of the method it replaces.

``functools.singledispatchmethod`` members are expanded into one descriptor
per registered implementation, concrete registrations first and the
``object`` fallback last.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache, singledispatchmethod
from typing import Any

from bean_map.core.exceptions import AccessError


@dataclass(frozen=True)
class ParameterDescriptor:
    """A method parameter, ``self`` excluded."""

    name: str
    annotation: Any
    required: bool
    positional: bool = True


@dataclass(frozen=True)
class MethodDescriptor:
    """A public method (or one overload of it)."""

    name: str
    parameters: tuple[ParameterDescriptor, ...]
    return_type: Any
    invoker: Callable[..., Any]

    @property
    def arity(self) -> int:
        """Number of arguments a caller must supply."""
        return sum(1 for p in self.parameters if p.required)

    def invoke(self, instance: Any, *args: Any) -> Any:
        """Call the method on *instance*.

        Raises:
            AccessError: If the call raises; the original exception is chained.
        """
        try:
            return self.invoker(instance, *args)
        except Exception as e:
            raise AccessError(self.name, f"{type(e).__name__}: {e}") from e


def _type_hints(func: Callable[..., Any]) -> dict[str, Any]:
    """Resolve annotations, falling back to the raw (possibly string) ones."""
    try:
        return typing.get_type_hints(func)
    except (NameError, TypeError, AttributeError, SyntaxError):
        return dict(getattr(func, "__annotations__", {}))


def _describe_function(
    name: str,
    func: Callable[..., Any],
    first_annotation: Any = inspect.Parameter.empty,
) -> MethodDescriptor | None:
    try:
        signature = inspect.signature(func)
    except (ValueError, TypeError):
        return None

    hints = _type_hints(func)
    params = list(signature.parameters.values())[1:]  # drop self
    described: list[ParameterDescriptor] = []
    for index, param in enumerate(params):
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        annotation = hints.get(param.name, Any)
        if index == 0 and first_annotation is not inspect.Parameter.empty:
            annotation = first_annotation
        described.append(
            ParameterDescriptor(
                name=param.name,
                annotation=annotation,
                required=param.default is param.empty,
                positional=param.kind is not param.KEYWORD_ONLY,
            )
        )

    return MethodDescriptor(
        name=name,
        parameters=tuple(described),
        return_type=hints.get("return", Any),
        invoker=func,
    )


def _describe_dispatch(name: str, member: singledispatchmethod) -> list[MethodDescriptor]:
    registry = member.dispatcher.registry
    ordered = [(cls, func) for cls, func in registry.items() if cls is not object]
    if object in registry:
        ordered.append((object, registry[object]))

    descriptors = []
    for cls, func in ordered:
        descriptor = _describe_function(name, func, Any if cls is object else cls)
        if descriptor is not None:
            descriptors.append(descriptor)
    return descriptors


def _public_members(cls: type) -> dict[str, Any]:
    """Collect public class attributes, base classes first."""
    members: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for name, value in vars(klass).items():
            if not name.startswith("_"):
                members[name] = value
    return members


@lru_cache(maxsize=256)
def _describe(cls: type) -> tuple[MethodDescriptor, ...]:
    descriptors: list[MethodDescriptor] = []
    for name, member in _public_members(cls).items():
        if isinstance(member, singledispatchmethod):
            descriptors.extend(_describe_dispatch(name, member))
        elif inspect.isfunction(member):
            descriptor = _describe_function(name, member)
            if descriptor is not None:
                descriptors.append(descriptor)
    return tuple(descriptors)


class TypeIntrospector:
    """Enumerates the public instance methods of a class.

    Results are cached per class and are immutable.
    """

    def describe(self, cls: type) -> tuple[MethodDescriptor, ...]:
        """Return method descriptors for *cls* in a stable order."""
        return _describe(cls)

    def methods_named(self, cls: type, name: str) -> tuple[MethodDescriptor, ...]:
        """Return every descriptor (overloads included) named *name*."""
        return tuple(d for d in _describe(cls) if d.name == name)
