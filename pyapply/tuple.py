"""
Tuple: a writer-style applicative pairing a value with a log.

The log (fst) is any Semigroup; apply and bind append the logs of both
sides in order, while the value (snd) is computed as usual.

    tell("start") ^ Tuple(Array.pure("value"), 7)
        == Tuple(Array.of_items("start", "value"), 7)
"""
from collections.abc import Callable
from typing import TypeVar, Type
from dataclasses import dataclass

from .array import Array
from .errors import require_callable
from .monad import Monad
from .monoid import Monoid
from .semigroup import Semigroup
A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
S = TypeVar('S', bound=Semigroup)


@dataclass(frozen=True)
class Tuple[L,A](Monad[A]):
    """ A value with the log written while computing it """

    fst: L
    snd: A

    @classmethod
    def pure(cls, value: A, monoid: Type[Monoid] = Array) -> "Tuple":
        """ value with an empty log of the given monoid """
        return cls(monoid.mempty(), value)

    def map(self, f: Callable[[A], B]) -> "Tuple[L, B]":
        return Tuple(self.fst, f(self.snd))

    def _apply(self: "Tuple[S, Callable[[B], C]]", other: "Tuple[S, B]") \
        -> "Tuple[S, C]":
        require_callable("Tuple", self.snd)
        return Tuple(self.fst.append(other.fst), self.snd(other.snd))

    def _bind(self: "Tuple[S, A]", m: Callable[[A], "Tuple[S, B]"]) \
        -> "Tuple[S, B]":
        match m(self.snd):
            case Tuple(log, value):
                return Tuple(self.fst.append(log), value)
            case other:
                raise TypeError(
                    f"Tuple bind needs a Tuple, got {type(other).__name__}")

    def __repr__(self):
        return f"Tuple({self.fst!r}, {self.snd!r})"


def tell(message: A) -> Tuple[Array[A], None]:
    """
    A Tuple whose log holds a single message.
    """
    return Tuple(Array.pure(message), None)
