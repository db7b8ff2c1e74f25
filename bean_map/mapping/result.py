"""Conversion results.

Every per-attribute step either succeeds, is skipped, or fails. Skips and
failures are collected as Diagnostic entries next to the converted value so
callers can decide for themselves whether an incomplete result is acceptable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from bean_map.core.enums import DiagnosticKind
from bean_map.core.exceptions import ConversionFailedError

T = TypeVar("T")


@dataclass(frozen=True)
class Diagnostic:
    """A skipped or failed attribute."""

    attribute: str
    kind: DiagnosticKind
    detail: str
    method_name: str | None = None


@dataclass(frozen=True)
class ConversionResult(Generic[T]):
    """Converted value plus the diagnostics gathered while producing it."""

    value: T
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def failures(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.kind is DiagnosticKind.FAILED]

    @property
    def skipped(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.kind is DiagnosticKind.SKIPPED]

    @property
    def ok(self) -> bool:
        """True when no attribute failed. Skips do not count."""
        return not self.failures

    def raise_for_errors(self) -> T:
        """Return the value, or raise ConversionFailedError if anything failed."""
        failures = self.failures
        if failures:
            raise ConversionFailedError(failures)
        return self.value
