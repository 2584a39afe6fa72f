""" Currying helpers used by ap and the lift functions """
from functools import wraps
import inspect
from typing import Callable, TypeVar

X = TypeVar('X')
Y = TypeVar('Y')
Z = TypeVar('Z')
def curry2(f: Callable[[X, Y], Z]) -> Callable[[X], Callable[[Y], Z]]:
    """Curry a binary function into two unary functions."""
    return lambda a: lambda b: f(a, b)

def curry3(f):
    """Curry a ternary function into three unary functions."""
    return lambda a: lambda b: lambda c: f(a, b, c)

def arity(f: Callable) -> int | None:
    """
    Number of required positional parameters of f,
    or None when f has no inspectable signature (max, min, ...).
    """
    try:
        params = inspect.signature(f).parameters.values()
    except (TypeError, ValueError):
        return None
    return sum(1 for p in params
               if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
               and p.default is p.empty)

def curry_n(f: Callable, n: int | None = None) -> Callable:
    """
    Curry any function f of n arguments into a chain of functions.
    Each call may supply one or more of the remaining arguments;
    f runs once n arguments have been collected.
    Without n the count is read from f's signature, and f is
    returned unchanged when that signature is unary or unknown.
    """
    count = arity(f) if n is None else n
    if count is None or count <= 1:
        return f

    @wraps(f)
    def curried(*args):
        if len(args) >= count:
            return f(*args)
        return lambda *more: curried(*args, *more)
    return curried
