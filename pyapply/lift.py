"""
Free function forms of apply, and the liftA helpers.

Each lift_aN has a fixed arity and is curried itself, so all of these
are the same:

    lift_a2(add, Just(2), Just(3))
    lift_a2(add)(Just(2), Just(3))
    lift_a2(add)(Just(2))(Just(3))

f may be curried or take its N arguments at once. Unless its signature
says it takes exactly one argument, f is curried to the helper's N
before it is mapped, so each apply supplies a single argument.
"""
from typing import Any, Callable, TypeVar

from .curry import arity, curry_n

B = TypeVar('B')

def apply(f, other):
    """ Applies the function in f to the value in other: f * other """
    return f * other

def _lift(n: int, f: Callable, first, *rest):
    step = f if arity(f) == 1 else curry_n(f, n)
    acc = first.map(step)
    for container in rest:
        acc = acc * container
    return acc

@curry_n
def lift_a2(f: Callable[[Any, Any], B], c1, c2):
    """ lift_a2(f, c1, c2) = (f & c1) * c2 """
    return _lift(2, f, c1, c2)

@curry_n
def lift_a3(f: Callable[[Any, Any, Any], B], c1, c2, c3):
    """ lift_a3(f, c1, c2, c3) = (f & c1) * c2 * c3 """
    return _lift(3, f, c1, c2, c3)

@curry_n
def lift_a4(f: Callable[[Any, Any, Any, Any], B], c1, c2, c3, c4):
    """ lift_a4(f, c1, c2, c3, c4) = (f & c1) * c2 * c3 * c4 """
    return _lift(4, f, c1, c2, c3, c4)
