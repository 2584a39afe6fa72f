"""
IO: a deferred, side-effecting computation.
Nothing happens until run is called; composing IO values only
builds a larger deferred computation.
"""
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from .derive import DeriveFromBind
from .monad import Monad

A = TypeVar("A")
B = TypeVar("B")


@dataclass(slots=True, frozen=True)
class IO[A](DeriveFromBind, Monad[A]):
    """
    Carrier for a side-effecting computation producing a value of type A.
    Only _bind is native: map and _apply are derived from it, so in
    iof * iox the effect of iof runs before the effect of iox.
    """
    _effect: Callable[[], A]

    def __init__(self, effect: Callable[[], A]):
        object.__setattr__(self, "_effect", effect)

    @classmethod
    def pure(cls, value: A) -> "IO[A]":
        """
        Lift a pure value into IO without any effect.
        """
        return cls(lambda: value)

    def _bind(self, m: Callable[[A], "IO[B]"]) -> "IO[B]":
        """
        Runs this effect, then the IO returned by m.
        """
        return IO(lambda: m(self._effect()).run())

    def run(self) -> A:
        """
        Performs the effect and returns its result.
        Every call performs the effect again.
        """
        return self._effect()

    unsafe_perform_io = run

    def __repr__(self):
        return "IO(<effect>)"


def defer(f: Callable[..., A], *args: Any) -> IO[A]:
    """
    Defers calling f with args until the IO is run.
    """
    return IO(lambda: f(*args))
