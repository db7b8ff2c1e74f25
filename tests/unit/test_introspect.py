"""Unit tests for TypeIntrospector."""

from __future__ import annotations

from functools import singledispatchmethod
from typing import Any

import pytest

from bean_map.core.exceptions import AccessError
from bean_map.core.introspect import TypeIntrospector


class Base:
    def getA(self) -> int:
        return 1

    def getB(self) -> str:
        return "base"

    def _hidden(self) -> None:
        pass


class Child(Base):
    def getC(self) -> float:
        return 3.0

    def getB(self) -> str:
        return "child"

    label = "not a method"

    @property
    def prop(self) -> int:
        return 0

    @staticmethod
    def getStatic() -> int:
        return 0


class Overloaded:
    @singledispatchmethod
    def setValue(self, value: object) -> None:
        raise TypeError("unsupported")

    @setValue.register
    def _(self, value: int) -> None:
        pass

    @setValue.register(str)
    def _(self, value) -> None:
        pass


class Signatures:
    def getOptional(self, scale: int = 1) -> int:
        return scale

    def getRequired(self, scale: int) -> int:
        return scale

    def getVariadic(self, *args: Any, **kwargs: Any) -> int:
        return 0

    def setKeyword(self, *, value: int) -> None:
        pass

    def setUntyped(self, value):
        pass


class Broken:
    def getBoom(self) -> int:
        raise RuntimeError("boom")


@pytest.fixture
def introspector() -> TypeIntrospector:
    return TypeIntrospector()


class TestDescribe:
    def test_base_first_declaration_order(self, introspector: TypeIntrospector) -> None:
        names = [d.name for d in introspector.describe(Child)]
        assert names == ["getA", "getB", "getC"]

    def test_override_keeps_position_and_uses_subclass(
        self, introspector: TypeIntrospector
    ) -> None:
        (get_b,) = introspector.methods_named(Child, "getB")
        assert get_b.invoke(Child()) == "child"

    def test_private_members_excluded(self, introspector: TypeIntrospector) -> None:
        assert introspector.methods_named(Base, "_hidden") == ()

    def test_non_functions_excluded(self, introspector: TypeIntrospector) -> None:
        names = {d.name for d in introspector.describe(Child)}
        assert not names & {"label", "prop", "getStatic"}

    def test_return_type_resolved(self, introspector: TypeIntrospector) -> None:
        (get_c,) = introspector.methods_named(Child, "getC")
        assert get_c.return_type is float

    def test_cached(self, introspector: TypeIntrospector) -> None:
        assert introspector.describe(Child) is introspector.describe(Child)


class TestSingleDispatch:
    def test_one_descriptor_per_overload(self, introspector: TypeIntrospector) -> None:
        overloads = introspector.methods_named(Overloaded, "setValue")
        annotations = [d.parameters[0].annotation for d in overloads]
        assert annotations == [int, str, Any]

    def test_overloads_are_single_argument(self, introspector: TypeIntrospector) -> None:
        assert all(d.arity == 1 for d in introspector.methods_named(Overloaded, "setValue"))


class TestArity:
    def test_optional_parameters_do_not_count(self, introspector: TypeIntrospector) -> None:
        (method,) = introspector.methods_named(Signatures, "getOptional")
        assert method.arity == 0

    def test_required_parameter(self, introspector: TypeIntrospector) -> None:
        (method,) = introspector.methods_named(Signatures, "getRequired")
        assert method.arity == 1

    def test_variadics_ignored(self, introspector: TypeIntrospector) -> None:
        (method,) = introspector.methods_named(Signatures, "getVariadic")
        assert method.arity == 0
        assert method.parameters == ()

    def test_keyword_only_flagged(self, introspector: TypeIntrospector) -> None:
        (method,) = introspector.methods_named(Signatures, "setKeyword")
        assert method.parameters[0].positional is False

    def test_unannotated_parameter_is_any(self, introspector: TypeIntrospector) -> None:
        (method,) = introspector.methods_named(Signatures, "setUntyped")
        assert method.parameters[0].annotation is Any


class TestInvoke:
    def test_failure_wrapped_in_access_error(self, introspector: TypeIntrospector) -> None:
        (method,) = introspector.methods_named(Broken, "getBoom")
        with pytest.raises(AccessError) as exc_info:
            method.invoke(Broken())
        assert exc_info.value.method_name == "getBoom"
        assert isinstance(exc_info.value.__cause__, RuntimeError)
