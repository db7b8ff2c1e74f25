"""Writer overload selection.

A writer's declared parameter annotation is flattened into a tuple of
accepted types once, at plan compile time. Selection then runs per value:

* ASSIGNABLE: first exact ``type(value)`` match in declaration order,
  otherwise the first candidate that accepts the value by ``isinstance``.
* NAME: first candidate whose accepted type has the same simple class
  name as ``type(value)``.

Unannotated and ``Any`` parameters accept every value in both modes.
"""

from __future__ import annotations

import inspect
import types
import typing
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from bean_map.core.enums import TypeMatch

if TYPE_CHECKING:
    from bean_map.mapping.plan import WriterPlan

_NONE_TYPE = type(None)

# int is acceptable where float or complex is declared; bool never is
_NUMERIC_WIDENING: dict[type, tuple[type, ...]] = {
    float: (int,),
    complex: (int, float),
}
_NUMBERS = (int, float, complex)


def accepted_types(annotation: Any) -> tuple[Any, ...]:
    """Flatten an annotation into the runtime types it accepts.

    Unresolvable forward references are kept as strings and matched by name.
    """
    if annotation is Any or annotation is object or annotation is inspect.Parameter.empty:
        return (object,)
    if annotation is None or annotation is _NONE_TYPE:
        return (_NONE_TYPE,)
    if isinstance(annotation, str):
        return (annotation,)
    if isinstance(annotation, typing.ForwardRef):
        return (annotation.__forward_arg__,)
    if isinstance(annotation, typing.TypeVar):
        return accepted_types(annotation.__bound__) if annotation.__bound__ else (object,)

    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        flattened: list[Any] = []
        for arg in typing.get_args(annotation):
            for accepted in accepted_types(arg):
                if accepted not in flattened:
                    flattened.append(accepted)
        return tuple(flattened)
    if origin is typing.Annotated:
        return accepted_types(typing.get_args(annotation)[0])
    if origin is typing.Literal:
        return tuple(dict.fromkeys(type(arg) for arg in typing.get_args(annotation)))
    if origin is not None:
        return (origin,)
    if isinstance(annotation, type):
        return (annotation,)
    return (object,)


def simple_name(accepted: Any) -> str:
    """Return the unqualified class name of a type or a type-name string."""
    if isinstance(accepted, str):
        return accepted.rsplit(".", 1)[-1].strip()
    return getattr(accepted, "__name__", str(accepted))


def _is_exact(value: Any, accepted: Any) -> bool:
    if isinstance(accepted, str):
        return type(value).__name__ == simple_name(accepted)
    return type(value) is accepted


def _is_assignable(value: Any, accepted: Any) -> bool:
    if accepted is object:
        return True
    if isinstance(accepted, str):
        return type(value).__name__ == simple_name(accepted)
    if isinstance(value, bool) and accepted in _NUMBERS:
        return False
    if type(value) in _NUMERIC_WIDENING.get(accepted, ()):
        return True
    try:
        return isinstance(value, accepted)
    except TypeError:
        return False


def _is_same_name(value: Any, accepted: Any) -> bool:
    return accepted is object or type(value).__name__ == simple_name(accepted)


def select_writer(
    value: Any,
    candidates: Sequence[WriterPlan],
    mode: TypeMatch = TypeMatch.ASSIGNABLE,
) -> WriterPlan | None:
    """Pick the writer overload for *value*, or None when nothing fits."""
    if mode is TypeMatch.NAME:
        for writer in candidates:
            if any(_is_same_name(value, t) for t in writer.param_types):
                return writer
        return None

    for writer in candidates:
        if any(_is_exact(value, t) for t in writer.param_types):
            return writer
    for writer in candidates:
        if any(_is_assignable(value, t) for t in writer.param_types):
            return writer
    return None
