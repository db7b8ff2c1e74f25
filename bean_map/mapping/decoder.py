"""Map-to-bean decoder."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from bean_map.core.config import ConverterConfig
from bean_map.core.enums import DiagnosticKind
from bean_map.core.exceptions import AccessError, ConstructionError
from bean_map.core.naming import writer_name
from bean_map.mapping.builder import compile_plan
from bean_map.mapping.matching import select_writer
from bean_map.mapping.result import ConversionResult, Diagnostic

T = TypeVar("T")


def construct(target_class: type[T]) -> T:
    """Build *target_class* with no arguments.

    Raises:
        ConstructionError: If the class cannot be called without arguments,
            is abstract, or its constructor raises.
    """
    if not isinstance(target_class, type):
        raise ConstructionError(repr(target_class), "not a class")

    name = target_class.__name__
    if inspect.isabstract(target_class):
        raise ConstructionError(name, "class is abstract")

    try:
        signature = inspect.signature(target_class)
    except (ValueError, TypeError):
        signature = None  # builtins without introspectable signatures
    if signature is not None:
        try:
            signature.bind()
        except TypeError as e:
            raise ConstructionError(name, f"no zero-argument constructor ({e})") from e

    try:
        return target_class()
    except Exception as e:
        raise ConstructionError(name, f"{type(e).__name__}: {e}") from e


class BeanDecoder:
    """Builds a bean from a dict through its ``setX`` writers.

    Each key is handled independently: the writer name is derived from the
    key, the overload is chosen by the runtime type of the value, and a key
    with no usable writer is skipped. Writer failures are logged and the
    partially-populated bean is still returned.

    Args:
        config: Converter configuration. Defaults to ``ConverterConfig()``.
    """

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self._config = config or ConverterConfig()
        self._logger = logging.getLogger("bean_map.decoder")

    def decode(self, target_class: type[T], data: Mapping[str, Any]) -> T:
        """Return a new *target_class* populated from *data*."""
        return self.decode_with_diagnostics(target_class, data).value

    def decode_with_diagnostics(
        self,
        target_class: type[T],
        data: Mapping[str, Any],
    ) -> ConversionResult[T]:
        """Decode *data* and report keys that were skipped or failed.

        Raises:
            ConstructionError: If *target_class* cannot be instantiated.
        """
        instance = construct(target_class)
        config = self._config
        plan = compile_plan(target_class, config.naming_style)
        diagnostics: list[Diagnostic] = []

        for key, value in data.items():
            if not isinstance(key, str):
                diagnostics.append(Diagnostic(str(key), DiagnosticKind.SKIPPED, "key is not a string"))
                continue
            if value is None and config.skip_none:
                diagnostics.append(Diagnostic(key, DiagnosticKind.SKIPPED, "value is None"))
                continue

            method_name = writer_name(key, config.naming_style)
            candidates = plan.writers_for(method_name) if method_name else ()
            if not candidates:
                self._logger.debug(f"No writer for '{key}' on {target_class.__name__}")
                diagnostics.append(
                    Diagnostic(key, DiagnosticKind.SKIPPED, "no writer", method_name)
                )
                continue

            writer = select_writer(value, candidates, config.type_match)
            if writer is None:
                self._logger.debug(
                    f"No overload of '{method_name}' accepts {type(value).__name__}"
                )
                diagnostics.append(
                    Diagnostic(
                        key,
                        DiagnosticKind.SKIPPED,
                        f"no overload accepts {type(value).__name__}",
                        method_name,
                    )
                )
                continue

            try:
                writer.method.invoke(instance, value)
            except AccessError as e:
                self._logger.warning(
                    f"Writer '{method_name}' of {target_class.__name__} failed: {e}",
                    exc_info=e.__cause__,
                )
                diagnostics.append(Diagnostic(key, DiagnosticKind.FAILED, e.detail, method_name))

        return ConversionResult(instance, tuple(diagnostics))

    def decode_many(self, target_class: type[T], rows: list[Mapping[str, Any]]) -> list[T]:
        """Decode all rows via decode."""
        return [self.decode(target_class, row) for row in rows]
