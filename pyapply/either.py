"""
Either: a value (Right) or the error that stopped the computation (Left).

The first Left reached wins: mapping, applying to or binding a Left gives
back that same Left, and Right applied to a Left gives the Left.
"""
from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Any, TypeVar, Callable

from .errors import require_callable
from .monad import Monad, ap

L = TypeVar("L")
R = TypeVar("R")
S = TypeVar("S")
T = TypeVar("T")

logger = logging.getLogger(__name__)

type Either[L,R] = 'Left[L]' | 'Right[R]'

@dataclass(frozen=True)
class Left[L](Monad):
    """ The error branch; every operation short-circuits to self """
    l: L

    @classmethod
    def pure(cls, value: R) -> Either[Any, R]:
        """ pure is the same for both branches: Right(value) """
        return Right(value)

    def map(self, f: Callable[[R], S]) -> Left[L]:
        return self

    def _apply(self, other) -> Left[L]:  # pylint: disable=unused-argument
        return self

    def _bind(self, m: Callable[[R], Either[L, S]]) -> Left[L]:  # pylint: disable=unused-argument
        return self

    def __repr__(self):
        return f"Left({self.l!r})"

@dataclass(frozen=True)
class Right[R](Monad[R]):
    """ The success branch """
    r: R

    @classmethod
    def pure(cls, value: R) -> Either[Any, R]:
        return Right(value)

    def map(self, f: Callable[[R], S]) -> Right[S]:
        return Right(f(self.r))

    def _apply(self: Right[Callable[[S], T]], other: Either[L, S])\
        -> Either[L, T]:
        """ Defined through bind, so a Left in other is passed through """
        require_callable("Right", self.r)
        return ap(self, other, Right)

    def _bind(self, m: Callable[[R], Either[L, S]]) -> Either[L, S]:
        return m(self.r)

    def __repr__(self):
        return f"Right({self.r!r})"


def either(on_left: Callable[[L], S], on_right: Callable[[R], S],
           e: Either[L, R]) -> S:
    """Case analysis: applies on_left to a Left, on_right to a Right."""
    match e:
        case Left(l):
            return on_left(l)
        case Right(r):
            return on_right(r)
        case _:
            raise TypeError(f"Expected Either, got {type(e).__name__}")

def try_either(fn: Callable[..., R], *args: Any) -> Either[Exception, R]:
    """
    Calls fn with args, returning Right with its result,
    or Left with the exception it raised.
    """
    try:
        return Right(fn(*args))
    except Exception as ex: # pylint: disable=broad-except
        logger.debug("try_either caught %r", ex)
        return Left(ex)
