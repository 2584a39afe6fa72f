"""
Semigroup: values with an associative append.

V joins the errors of two failures with append, and Tuple joins the logs
of the two sides of every apply and bind.
"""
from typing import Protocol, Self


class Semigroup(Protocol):
    """ (a.append(b)).append(c) == a.append(b.append(c)) """

    def append(self, other: Self) -> Self: ...
