"""Enumerations shared by the naming, planning and conversion layers."""

from __future__ import annotations

from enum import Enum


class NamingStyle(Enum):
    """Accessor naming conventions."""

    CAMEL = "camel"  # getLongName / isLongName / setLongName
    SNAKE = "snake"  # get_long_name / is_long_name / set_long_name


class TypeMatch(Enum):
    """Strategies for choosing a writer overload for a value."""

    ASSIGNABLE = "assignable"
    NAME = "name"


class ReaderKind(Enum):
    """Reader flavours recognised by the encoder."""

    GET = "get"
    IS = "is"


class DiagnosticKind(Enum):
    """Outcome of a single attribute step that did not succeed."""

    SKIPPED = "skipped"
    FAILED = "failed"
