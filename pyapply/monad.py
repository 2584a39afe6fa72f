""" monad base class and function helpers
"""
# pylint: disable=W2301
from __future__ import annotations
from abc import abstractmethod
from typing import Callable, TypeVar

from .applicative import Applicative

A = TypeVar('A')
B = TypeVar('B')

class Monad[A](Applicative[A]):
    """
    Base class for Monad, extending Applicative
    with bind and right-shift operations.

    Laws:
        left identity:  pure(x) >> k == k(x)
        right identity: m >> pure == m
        associativity:  (m >> k) >> h == m >> (lambda x: k(x) >> h)
    """
    def __rshift__(self, m: Callable[[A], Monad[B]]) -> Monad[B]:
        """ Override >> operator """
        return self._bind(m)

    @abstractmethod
    def _bind(self, m: Callable[[A], Monad[B]]) -> Monad[B]:
        """
        Chains computations by passing the value inside the Monad to function m.
        """

    def chain(self, m: Callable[[A], Monad[B]]) -> Monad[B]:
        """
        Chains a computation that depends on the value inside the Monad.
        """
        return self._bind(m)

    bind = chain

def ap(mf, mx, mtype):
    """
    Used to implement apply in terms of bind.
    The binds provide the monadic logic that would need to be replicated
    in both bind and apply. mf is always evaluated before mx.
    """
    return \
        mf >> (lambda f:
        mx >> (lambda x:
        mtype.pure(f(x))
        ))

def comp(f: Callable, g: Callable) -> Callable:
    """
    Composes two functions f and g into a single function.
    """
    return lambda x: f(g(x))

def compose(f: Callable) -> Callable[[Callable], Callable]:
    """
    Curried composition, the function lifted in the composition law.
    """
    return lambda g: comp(f, g)

def identity(x):
    """
    Returns the argument unchanged.
    """
    return x
