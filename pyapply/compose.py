"""
Composition of two applicatives, e.g. a Task of Maybe.

Applicatives are closed under composition: applying a composed
container applies at the outer layer and again at the inner layer,
so both variants are kept in the result.

    tm = Compose(Task.pure(Just(2)))
    lift_a2(add, tm, Compose(Task.pure(Nothing)))  # a Task of Nothing
"""
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from .functor import Functor
from .lift import lift_a2

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True)
class Compose[A](Functor[A]):
    """
    Wraps an outer applicative whose values are inner applicatives.
    """
    outer: Any

    def map(self, f: Callable[[A], B]) -> "Compose[B]":
        """ Maps f through both layers """
        return Compose(self.outer.map(lambda inner: inner.map(f)))

    def _apply(self: "Compose[Callable[[B], C]]", other: "Compose[B]") \
        -> "Compose[C]":
        """ lift_a2 of the inner apply over the outer layer """
        return Compose(lift_a2(lambda gf, gx: gf * gx,
                               self.outer, other.outer))

    def ap(self, other: "Compose[B]") -> "Compose[C]":
        """ Applies the wrapped function through both layers """
        return self._apply(other)

    def __mul__(self, other: "Compose[B]") -> "Compose[C]":
        return self._apply(other)

    def decompose(self) -> Any:
        """ The underlying nested container """
        return self.outer

    def __repr__(self):
        return f"Compose({self.outer!r})"


def compose_pure(outer_pure: Callable[[Any], Any],
                 inner_pure: Callable[[Any], Any]) \
    -> Callable[[A], Compose[A]]:
    """
    pure for a composed applicative, built from the pure of each layer.
    """
    return lambda value: Compose(outer_pure(inner_pure(value)))
