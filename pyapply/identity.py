""" Identity container: the plainest applicative, wrapping a single value """
from dataclasses import dataclass
from typing import Callable, TypeVar

from .derive import MapFromApply
from .errors import require_callable
from .monad import Monad

B = TypeVar("B")
C = TypeVar("C")

@dataclass(frozen=True)
class Identity[A](MapFromApply, Monad[A]):
    """
    Wraps a value with no additional context.
    map is derived from pure and _apply.
    """
    value: A

    @classmethod
    def pure(cls, value: A) -> "Identity[A]":
        return cls(value)

    def _apply(self: "Identity[Callable[[B], C]]", other: "Identity[B]") \
        -> "Identity[C]":
        require_callable("Identity", self.value)
        return Identity(self.value(other.value))

    def _bind(self, m: Callable[[A], "Identity[B]"]) -> "Identity[B]":
        return m(self.value)

    def extract(self) -> A:
        """ Returns the wrapped value """
        return self.value

    def __repr__(self):
        return f"Identity({self.value!r})"

Container = Identity
