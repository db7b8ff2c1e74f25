"""Bean-to-map encoder."""

from __future__ import annotations

import logging
from typing import Any

from bean_map.core.config import ConverterConfig
from bean_map.core.enums import DiagnosticKind, ReaderKind
from bean_map.core.exceptions import AccessError
from bean_map.mapping.builder import compile_plan
from bean_map.mapping.result import ConversionResult, Diagnostic


class BeanEncoder:
    """Reads every ``getX``/``isX`` reader of a bean into a dict.

    ``getX`` values are stored whatever their type. ``isX`` values are stored
    only when the call returns a bool. A reader that raises is logged and left
    out; encoding itself never raises for a single attribute.

    Args:
        config: Converter configuration. Defaults to ``ConverterConfig()``.
    """

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self._config = config or ConverterConfig()
        self._logger = logging.getLogger("bean_map.encoder")

    def encode(self, bean: Any) -> dict[str, Any]:
        """Return the readable attributes of *bean* as a new dict."""
        return self.encode_with_diagnostics(bean).value

    def encode_with_diagnostics(self, bean: Any) -> ConversionResult[dict[str, Any]]:
        """Encode *bean* and report skipped or failed readers."""
        plan = compile_plan(type(bean), self._config.naming_style)
        data: dict[str, Any] = {}
        diagnostics: list[Diagnostic] = []

        for reader in plan.readers:
            try:
                value = reader.method.invoke(bean)
            except AccessError as e:
                self._logger.warning(
                    f"Reader '{reader.method_name}' of {plan.target_class.__name__} failed: {e}",
                    exc_info=e.__cause__,
                )
                diagnostics.append(
                    Diagnostic(reader.attribute, DiagnosticKind.FAILED, e.detail, reader.method_name)
                )
                continue

            if reader.kind is ReaderKind.IS and not isinstance(value, bool):
                self._logger.debug(
                    f"Ignoring '{reader.method_name}': returned {type(value).__name__}, not bool"
                )
                diagnostics.append(
                    Diagnostic(
                        reader.attribute,
                        DiagnosticKind.SKIPPED,
                        f"returned {type(value).__name__}, not bool",
                        reader.method_name,
                    )
                )
                continue

            if value is None and self._config.skip_none:
                diagnostics.append(
                    Diagnostic(reader.attribute, DiagnosticKind.SKIPPED, "value is None", reader.method_name)
                )
                continue

            # Colliding attribute names: last reader wins
            data[reader.attribute] = value

        return ConversionResult(data, tuple(diagnostics))

    def encode_many(self, beans: list[Any]) -> list[dict[str, Any]]:
        """Encode all beans via encode."""
        return [self.encode(bean) for bean in beans]
