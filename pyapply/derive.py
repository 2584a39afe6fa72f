"""
Capabilities derived for free from a stronger one.

A variant opts in by mixing one of the classes below in front of its
base class, or calls the free functions from its own methods:

    class Identity[A](MapFromApply, Monad[A]): ...   # map via pure/ap
    class IO[A](DeriveFromBind, Monad[A]): ...       # map and ap via bind

Deriving ap from bind evaluates the function container completely before
the argument container. A variant whose operands could run concurrently
(Task) should define _apply natively instead.
"""
from typing import Any, Callable, TypeVar

A = TypeVar('A')
B = TypeVar('B')

def map_from_apply(fa, f: Callable[[A], B]):
    """ Functor from Applicative: map(f) = pure(f) * fa """
    return fa.pure(f)._apply(fa) # pylint: disable=W0212

def map_from_bind(ma, f: Callable[[A], B]):
    """ Functor from Monad: map(f) = ma >> (lambda x: pure(f(x))) """
    return ma._bind(lambda x: ma.pure(f(x))) # pylint: disable=W0212

def apply_from_bind(mf, mx):
    """ Applicative from Monad: mf * mx = mf >> (lambda f: f & mx) """
    return mf._bind(mx.map) # pylint: disable=W0212


class MapFromApply:
    """ Mixin supplying map from pure and _apply """

    def map(self, f: Callable[[Any], Any]):
        """ Derived map: pure(f) * self """
        return map_from_apply(self, f)


class DeriveFromBind:
    """
    Mixin supplying map and _apply from pure and _bind.
    Applying sequences the function container before the argument.
    """

    def map(self, f: Callable[[Any], Any]):
        """ Derived map: self >> (lambda x: pure(f(x))) """
        return map_from_bind(self, f)

    def _apply(self, other):
        """ Derived apply: self >> (lambda f: f & other) """
        return apply_from_bind(self, other)
