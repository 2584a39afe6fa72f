"""
Monoid: a Semigroup with an empty element.

    a.append(mempty()) == a == mempty().append(a)

Tuple.pure takes a Monoid class to build the empty log of a pure value.
"""
from typing import Protocol, Self

from .semigroup import Semigroup


class Monoid(Semigroup, Protocol):
    """ Array and String are the Monoids used in pyapply """

    @classmethod
    def mempty(cls) -> Self: ...
