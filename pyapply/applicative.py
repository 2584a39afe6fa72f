"""
Applicative functor base class definitions for pyapply.
"""
from __future__ import annotations
from abc import abstractmethod
from typing import Callable, Self, TypeVar

from .functor import Functor

T = TypeVar('T')
U = TypeVar('U')
V = TypeVar('V')

class Applicative[T](Functor[T]):
    """
    Base class for Applicative functors, providing pure, map
    and applicative application.

    Sub-classes supply pure and _apply (and map, unless it is derived,
    see pyapply.derive). The laws that must hold are:

        identity:      pure(identity) * v == v
        homomorphism:  pure(f) * pure(x) == pure(f(x))
        interchange:   u * pure(x) == pure(lambda g: g(x)) * u
        composition:   pure(compose) * u * v * w == u * (v * w)
    """
    @classmethod
    @abstractmethod
    def pure(cls, value: T) -> Applicative[T]:
        """
        Wraps a value in the Applicative context.
        """

    @classmethod
    def of(cls, value: T) -> Applicative[T]:
        """
        Alias of pure.
        """
        return cls.pure(value)

    @abstractmethod
    def _apply(self: Applicative[Callable[[U], V]], other: Applicative[U]) \
        -> Applicative[V]:
        """
        Applies the function wrapped in this Applicative context to the value
        in another Applicative context of the same variant.
        """

    def ap(self: Applicative[Callable[[U], V]], other: Applicative[U]) \
        -> Applicative[V]:
        """
        Applies the wrapped function to the wrapped value in other.
        A curried function receives one more argument per ap.
        """
        return self._apply(other)

    def __mul__(self: Applicative[Callable[[U], V]], other: Applicative[U]) \
        -> Applicative[V]:
        """
        Enables using the * operator for applicative application.
        """
        return self._apply(other)

    def apply_second(self, other: Applicative[U]) -> Applicative[U]:
        """
        Sequences two Applicatives, discarding the value of the first.
        Failure or absence in either one is kept.
        """
        return ((lambda _: lambda y: y) & self) * other

    def apply_first(self: Self, other: Applicative[U]) -> Self:
        """
        Sequences two Applicatives, discarding the value of the second.
        """
        return ((lambda x: lambda _: x) & self) * other

    def __xor__(self, other: Applicative[U]) -> Applicative[U]:
        """
        Overrides the ^ operator to use apply_second.
        """
        return self.apply_second(other)
