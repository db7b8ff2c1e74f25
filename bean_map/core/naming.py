"""Accessor naming convention.

CAMEL style:
    getLongName  -> ("get", "longName")
    isLongName   -> ("is",  "longName")
    setLongName  <- "longName"

SNAKE style:
    get_long_name -> ("get", "long_name")
    set_long_name <- "long_name"

The derived attribute name is the mapping key on both the encode and the
decode path, so ``writer_name(parse_reader(m)[1])`` always names the writer
paired with reader ``m``.
"""

from __future__ import annotations

from functools import lru_cache

from bean_map.core.enums import NamingStyle, ReaderKind

_PREFIXES: dict[NamingStyle, dict[str, str]] = {
    NamingStyle.CAMEL: {"get": "get", "is": "is", "set": "set"},
    NamingStyle.SNAKE: {"get": "get_", "is": "is_", "set": "set_"},
}


def decapitalize(name: str) -> str:
    """Lower-case the first character only."""
    return name[:1].lower() + name[1:]


def capitalize_first(name: str) -> str:
    """Upper-case the first character only (unlike str.capitalize)."""
    return name[:1].upper() + name[1:]


def _strip(method_name: str, prefix: str, style: NamingStyle) -> str | None:
    if not method_name.startswith(prefix) or len(method_name) <= len(prefix):
        return None
    rest = method_name[len(prefix) :]
    if rest.startswith("_"):
        return None
    if style is NamingStyle.CAMEL:
        return decapitalize(rest)
    return rest


@lru_cache(maxsize=1024)
def parse_reader(
    method_name: str,
    style: NamingStyle = NamingStyle.CAMEL,
) -> tuple[ReaderKind, str] | None:
    """Return ``(kind, attribute)`` if *method_name* names a reader.

    A bare prefix (``get``, ``is``) is not a reader.
    """
    prefixes = _PREFIXES[style]
    attribute = _strip(method_name, prefixes["get"], style)
    if attribute is not None:
        return ReaderKind.GET, attribute
    attribute = _strip(method_name, prefixes["is"], style)
    if attribute is not None:
        return ReaderKind.IS, attribute
    return None


@lru_cache(maxsize=1024)
def parse_writer(method_name: str, style: NamingStyle = NamingStyle.CAMEL) -> str | None:
    """Return the attribute written by *method_name*, or None."""
    return _strip(method_name, _PREFIXES[style]["set"], style)


def writer_name(attribute: str, style: NamingStyle = NamingStyle.CAMEL) -> str | None:
    """Return the writer method name expected for a mapping key.

    Returns None for an empty key, which no writer can match.
    """
    if not attribute:
        return None
    prefix = _PREFIXES[style]["set"]
    if style is NamingStyle.CAMEL:
        return prefix + capitalize_first(attribute)
    return prefix + attribute
