"""
Array: an immutable sequence that is a monoid and a monad.

Applying an Array of functions to an Array of values tries every pairing,
so ap is the cartesian product. Validation collects its errors in an
Array and the law checks report their results in one.
"""
# pylint: disable=W0212
from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, TypeVar

from .applicative import Applicative
from .errors import require_callable
from .monad import Monad

B = TypeVar('B')
C = TypeVar('C')

@dataclass(frozen=True)
class Array[A](Monad[A]):
    """ Immutable sequence of values """
    items: tuple[A, ...]

    @classmethod
    def of_items(cls, *items: A) -> Array[A]:
        """ Array(("a", "b")) written as Array.of_items("a", "b") """
        return cls(items)

    @classmethod
    def pure(cls, x: A) -> Array[A]:
        return cls((x,))

    @classmethod
    def mempty(cls) -> Array[Any]:
        return cls(())

    def append(self, other: Array[A]) -> Array[A]:
        return Array(self.items + other.items)

    __add__ = append

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def length(self) -> int:
        return len(self.items)

    def map(self, f: Callable[[A], B]) -> Array[B]:
        return Array(tuple(f(x) for x in self.items))

    def _bind(self, m: Callable[[A], Array[B]]) -> Array[B]:
        """ Concatenates the Arrays m returns for each element, in order """
        return reduce(Array.append, (m(x) for x in self.items),
                      Array.mempty())

    def _apply(self: Array[Callable[[B], C]], other: Array[B]) -> Array[C]:
        def pairings(f: Callable[[B], C]) -> Array[C]:
            require_callable("Array", f)
            return other.map(f)
        return self._bind(pairings)

    def foldl(self, f: Callable[[B, A], B], acc: B) -> B:
        """ Combines the elements from the left, starting with acc """
        return reduce(f, self.items, acc)

    def traverse(self, f: Callable[[A], Applicative[B]],
                 pure: Callable[[Array[B]], Applicative[Array[B]]] \
                     | None = None) -> Applicative[Array[B]]:
        """
        Runs f on each element and gathers the results inside f's
        applicative: Just of an Array, a Task of an Array, and so on.

        The target applicative is read off the first result, so an empty
        Array needs pure to build the empty result.
        """
        if not self.items:
            if pure is None:
                raise ValueError("Cannot traverse an empty Array without pure.")
            return pure(Array.mempty())
        *init, last = self.items
        prepend = lambda x: lambda xs: Array((x,) + xs.items)
        return reduce(lambda acc, x: (prepend & f(x)) * acc,
                      reversed(init),
                      f(last).map(Array.pure))

    def sequence(self: Array[Applicative[B]],
                 pure: Callable[[Array[B]], Applicative[Array[B]]] \
                     | None = None) -> Applicative[Array[B]]:
        """ traverse with nothing to do to each element """
        return self.traverse(lambda x: x, pure)

    def __repr__(self):
        return f"[{', '.join(map(repr, self.items))}]"
