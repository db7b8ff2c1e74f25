"""
Example 02: Overloaded Writers and Diagnostics

This example demonstrates writer overloads with singledispatchmethod, the two
type matching strategies, and inspecting skipped/failed attributes.
"""

import logging
from functools import singledispatchmethod

from bean_map import BeanConverter, ConverterConfig, ConversionFailedError, TypeMatch


class Temperature:
    """Record whose writer accepts several value types"""

    def __init__(self):
        self._celsius = 0.0

    def getCelsius(self) -> float:
        return self._celsius

    @singledispatchmethod
    def setCelsius(self, value: object) -> None:
        raise TypeError(f"cannot read a temperature from {type(value).__name__}")

    @setCelsius.register
    def _(self, value: float) -> None:
        self._celsius = value

    @setCelsius.register
    def _(self, value: str) -> None:
        self._celsius = float(value.rstrip("C"))


def main():
    logging.basicConfig(level=logging.INFO)
    converter = BeanConverter()

    print("=== Overloaded Writers ===\n")
    for raw in (21.5, "19C", 20):
        t = converter.decode(Temperature, {"celsius": raw})
        print(f"   {raw!r:>6} -> {t.getCelsius()}")
    print()

    print("=== Name Matching ===\n")
    strict = BeanConverter(ConverterConfig(type_match=TypeMatch.NAME))
    result = strict.decode_with_diagnostics(Temperature, {"celsius": 20})
    print(f"   int 20 -> {result.value.getCelsius()} (failures: {len(result.failures)})\n")

    print("=== Diagnostics ===\n")
    result = converter.decode_with_diagnostics(Temperature, {"celsius": [1], "kelvin": 3})
    for diagnostic in result.diagnostics:
        print(f"   {diagnostic.kind.value:<8} {diagnostic.attribute}: {diagnostic.detail}")
    try:
        result.raise_for_errors()
    except ConversionFailedError as e:
        print(f"   raise_for_errors -> {e}")


if __name__ == "__main__":
    main()
