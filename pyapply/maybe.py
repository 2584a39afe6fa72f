"""
Maybe: a value that may be absent.

Nothing is a singleton; anything mapped over, applied to or bound from
Nothing stays Nothing, so a chain of lookups stops at the first gap:

    Just.pure(curry2(add)) * Just(2) * Nothing is Nothing
"""
from abc import ABCMeta
from enum import Enum, EnumMeta
from dataclasses import dataclass
from typing import Callable, TypeVar

from .errors import require_callable
from .monad import Monad

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

type Maybe[A] = Just[A] | _Nothing


class NothingMaybeMeta(ABCMeta, EnumMeta):
    pass


class _Nothing(Monad, Enum, metaclass=NothingMaybeMeta):
    NOTHING = "Nothing"

    @classmethod
    def pure(cls, value: A) -> "Just[A]":
        """pure never builds an absent value, even when called on Nothing."""
        return Just(value)

    def map(self, f: Callable[[A], B]) -> "_Nothing":
        return self

    def _apply(self, other: Maybe) -> "_Nothing":
        return self

    def _bind(self, m: Callable[[A], "Maybe[B]"]) -> "_Nothing":
        return self

    def __repr__(self):
        return "Nothing"

    def __bool__(self) -> bool:
        return False

Nothing: _Nothing = _Nothing.NOTHING

@dataclass(frozen=True)
class Just[A](Monad[A]):
    """ A present value """
    a: A

    @classmethod
    def pure(cls, value: A) -> 'Just[A]':
        return cls(value)

    def map(self, f: Callable[[A], B]) -> "Just[B]":
        return Just(f(self.a))

    def _apply(self: "Just[Callable[[B], C]]", other: Maybe[B]) -> Maybe[C]:
        require_callable("Just", self.a)
        match other:
            case Just(value):
                return Just(self.a(value))
            case _:
                return Nothing

    def _bind(self, m: Callable[[A], Maybe[B]]) -> Maybe[B]:
        return m(self.a)

    def __repr__(self):
        return f"Just({self.a!r})"


def from_maybe(default: A, m: Maybe[A]) -> A:
    """Extracts the value from a Maybe, or returns a default value."""
    match m:
        case Just(value):
            return value
        case _:
            return default

def maybe(default: B, f: Callable[[A], B], m: Maybe[A]) -> B:
    """Applies f to the value in Just, or returns the default for Nothing."""
    match m:
        case Just(value):
            return f(value)
        case _:
            return default

def to_maybe(value: A | None) -> Maybe[A]:
    """Lifts an optional value: None becomes Nothing."""
    return Nothing if value is None else Just(value)
