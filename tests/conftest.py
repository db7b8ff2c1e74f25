"""Shared test fixtures."""

from __future__ import annotations

from functools import singledispatchmethod

import pytest


class DemoBean:
    """Record with plain, derived and overloaded accessors."""

    def __init__(self) -> None:
        self._id: int | None = None
        self._name: str | None = None
        self._private_field = "privateField"

    def isolate(self) -> int:
        return 0

    def getId(self) -> int | None:
        return self._id

    def setId(self, id: int) -> None:  # noqa: A002
        self._id = id

    def getName(self) -> str | None:
        return self._name

    def getNameWithSuffix(self, i: int) -> str:
        return f"{self._name}{i}"

    @singledispatchmethod
    def setName(self, name: object) -> None:
        raise TypeError(f"unsupported name type: {type(name).__name__}")

    @setName.register
    def _(self, name: str) -> None:
        self._name = name

    @setName.register
    def _(self, name: int) -> None:
        self._name = f"#{name}"

    def isLongName(self) -> bool:
        return self._name is not None and len(self._name) > 10


def _is(self: DemoBean) -> str:
    return ""


# "is" is a keyword, so the bare-prefix sentinel has to be attached by name
setattr(DemoBean, "is", _is)


@pytest.fixture
def demo_bean_class() -> type[DemoBean]:
    return DemoBean


@pytest.fixture
def demo_bean() -> DemoBean:
    """DemoBean with id=100 and a name longer than ten characters."""
    bean = DemoBean()
    bean.setId(100)
    bean.setName("AAAAAAAAAAAAAAAAAAA")
    return bean
