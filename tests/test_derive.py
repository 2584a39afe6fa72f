"""Test the derived map and apply using pytest."""
from dataclasses import dataclass
from typing import Callable

from pyapply.derive import DeriveFromBind, MapFromApply, apply_from_bind, \
    map_from_apply, map_from_bind
from pyapply.either import Left, Right
from pyapply.maybe import Just, Nothing
from pyapply.monad import Monad


@dataclass(frozen=True)
class Box[A](DeriveFromBind, Monad[A]):
    """A variant that only defines pure and bind."""
    value: A

    @classmethod
    def pure(cls, value):
        return cls(value)

    def _bind(self, m: Callable):
        return m(self.value)


@dataclass(frozen=True)
class Pointed[A](MapFromApply, Monad[A]):
    """A variant that only defines pure, apply and bind."""
    value: A

    @classmethod
    def pure(cls, value):
        return cls(value)

    def _apply(self, other):
        return Pointed(self.value(other.value))

    def _bind(self, m: Callable):
        return m(self.value)


def test_mixin_from_bind_supplies_map_and_apply():
    assert Box(2).map(lambda x: x + 1) == Box(3)
    assert Box(lambda x: x * 2) * Box(5) == Box(10)


def test_mixin_from_apply_supplies_map():
    assert Pointed(2).map(str) == Pointed("2")
    assert (str & Pointed(2)) == Pointed("2")


def test_free_functions_agree_with_native_operations():
    inc = lambda x: x + 1
    assert map_from_apply(Just(1), inc) == Just(1).map(inc)
    assert map_from_bind(Just(1), inc) == Just(1).map(inc)
    assert map_from_bind(Nothing, inc) is Nothing
    assert apply_from_bind(Right(inc), Right(1)) == Right(inc) * Right(1)
    assert apply_from_bind(Right(inc), Left("e")) == Left("e")
    assert apply_from_bind(Left("f"), Left("e")) == Left("f")

