"""BeanMap exception hierarchy.

Only ConstructionError escapes a plain encode/decode call. Per-attribute
failures are wrapped in AccessError and recorded as diagnostics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bean_map.mapping.result import Diagnostic


class BeanMapError(Exception):
    """Base exception for all BeanMap errors."""


# --- Decoding ---


class ConstructionError(BeanMapError):
    """Raised when the target type cannot be built with no arguments."""

    def __init__(self, target_class: str, detail: str) -> None:
        self.target_class = target_class
        self.detail = detail
        super().__init__(f"Cannot construct {target_class}: {detail}")


# --- Accessors ---


class AccessError(BeanMapError):
    """Raised when a reader or writer invocation fails."""

    def __init__(self, method_name: str, detail: str) -> None:
        self.method_name = method_name
        self.detail = detail
        super().__init__(f"Accessor '{method_name}' failed: {detail}")


# --- Results ---


class ConversionFailedError(BeanMapError):
    """Raised on demand when a conversion recorded failed attributes."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        names = [d.attribute for d in diagnostics]
        super().__init__(f"Conversion failed for attributes {names}")
