"""Unit tests for writer overload selection."""

from __future__ import annotations

from typing import Any, Literal, Optional, Union

import pytest

from bean_map.core.enums import TypeMatch
from bean_map.core.introspect import MethodDescriptor
from bean_map.mapping.matching import accepted_types, select_writer, simple_name
from bean_map.mapping.plan import WriterPlan


class Animal:
    pass


class Dog(Animal):
    pass


def _writer(*param_types: Any) -> WriterPlan:
    method = MethodDescriptor(name="setValue", parameters=(), return_type=None, invoker=print)
    return WriterPlan(attribute="value", method=method, param_types=param_types)


class TestAcceptedTypes:
    def test_plain_class(self) -> None:
        assert accepted_types(int) == (int,)

    @pytest.mark.parametrize("annotation", [Any, object])
    def test_anything(self, annotation: Any) -> None:
        assert accepted_types(annotation) == (object,)

    def test_optional(self) -> None:
        assert accepted_types(Optional[int]) == (int, type(None))

    def test_pep604_union(self) -> None:
        assert accepted_types(int | str) == (int, str)

    def test_nested_union_flattened_without_duplicates(self) -> None:
        assert accepted_types(Union[int, Union[str, int]]) == (int, str)

    def test_generic_alias_uses_origin(self) -> None:
        assert accepted_types(list[int]) == (list,)

    def test_literal_uses_value_types(self) -> None:
        assert accepted_types(Literal["a", "b", 1]) == (str, int)

    def test_unresolved_forward_reference_kept_as_name(self) -> None:
        assert accepted_types("Missing") == ("Missing",)

    def test_none(self) -> None:
        assert accepted_types(None) == (type(None),)


class TestSimpleName:
    def test_type(self) -> None:
        assert simple_name(int) == "int"

    def test_dotted_string(self) -> None:
        assert simple_name("java.lang.Integer") == "Integer"


class TestAssignableSelection:
    def test_exact_match_beats_earlier_assignable(self) -> None:
        animal = _writer(Animal)
        dog = _writer(Dog)
        assert select_writer(Dog(), [animal, dog]) is dog

    def test_first_assignable_in_declaration_order(self) -> None:
        first = _writer(Animal)
        second = _writer(object)
        assert select_writer(Dog(), [first, second]) is first

    def test_subclass_accepted(self) -> None:
        animal = _writer(Animal)
        assert select_writer(Dog(), [animal]) is animal

    def test_no_match(self) -> None:
        assert select_writer("text", [_writer(int)]) is None

    def test_bool_never_matches_int(self) -> None:
        assert select_writer(True, [_writer(int)]) is None

    def test_bool_matches_bool(self) -> None:
        writer = _writer(bool)
        assert select_writer(False, [_writer(int), writer]) is writer

    def test_int_widens_to_float(self) -> None:
        writer = _writer(float)
        assert select_writer(3, [writer]) is writer

    def test_float_does_not_narrow_to_int(self) -> None:
        assert select_writer(3.5, [_writer(int)]) is None

    def test_none_requires_optional(self) -> None:
        optional = _writer(int, type(None))
        assert select_writer(None, [_writer(int), optional]) is optional

    def test_any_accepts_everything_after_exact(self) -> None:
        anything = _writer(object)
        exact = _writer(str)
        assert select_writer("x", [anything, exact]) is exact
        assert select_writer(1.5, [anything, exact]) is anything

    def test_name_fallback_for_forward_reference(self) -> None:
        writer = _writer("Dog")
        assert select_writer(Dog(), [writer]) is writer

    def test_empty_candidates(self) -> None:
        assert select_writer(1, []) is None


class TestNameSelection:
    def test_simple_name_equality(self) -> None:
        writer = _writer(int)
        assert select_writer(7, [writer], TypeMatch.NAME) is writer

    def test_subclass_not_accepted(self) -> None:
        assert select_writer(Dog(), [_writer(Animal)], TypeMatch.NAME) is None

    def test_no_numeric_widening(self) -> None:
        assert select_writer(3, [_writer(float)], TypeMatch.NAME) is None

    def test_first_match_wins(self) -> None:
        first = _writer(object)
        second = _writer(int)
        assert select_writer(1, [first, second], TypeMatch.NAME) is first

    def test_qualified_name_string(self) -> None:
        writer = _writer("java.lang.str")
        assert select_writer("abc", [writer], TypeMatch.NAME) is writer
