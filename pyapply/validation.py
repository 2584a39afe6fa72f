"""
Implements purescript-like Validation applicative in Python.

Unlike Either, applying two failed validations keeps both errors,
combined with the error type's Semigroup append. V is an Applicative
but deliberately not a Monad: a bind could not see the second error.
"""
from __future__ import annotations
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar, cast

from .applicative import Applicative
from .array import Array
from .either import Either, Left, Right
from .errors import require_callable
from .semigroup import Semigroup

S = TypeVar('S')
T = TypeVar('T')
E = TypeVar('E', bound=Semigroup)

Valid = Right
Invalid = Left
type Validity[E, R] = Invalid[E] | Valid[R]

@dataclass(frozen=True)
class V[E, R](Applicative[R]):
    """
    Applicative validation type that accumulates errors.
    """
    either: Either[E, R]

    @property
    def validity(self) -> Validity[E, R]:
        """ Access underlying Either value """
        return self.either

    def map(self, f: Callable[[R], S]) -> V[E, S]:
        """ Functor map delegated to Either """
        return V(self.either.map(f))

    def _apply(self: V[E, Callable[[S], T]],
               other: Applicative[S]) -> V[E, T]:
        """
        Both sides valid: the function applied to the value.
        One side invalid: its errors. Both invalid: their errors appended.
        """
        match self.either, cast(V[E, S], other).either:
            case Valid(f), Valid(x):
                require_callable("V", f)
                return V(Valid(f(x)))
            case Valid(f), Invalid() as failed:
                require_callable("V", f)
                return V(failed)
            case Invalid() as failed, Valid():
                return V(failed)
            case Invalid(err1), Invalid(err2):
                return V(Invalid(cast(Semigroup, err1).append(err2)))
        raise TypeError("V must wrap an Either")

    @classmethod
    def pure(cls, value:T) -> V[Any, T]:
        """ Wraps a value in a successful Validation """
        return V(Valid(value))

    @classmethod
    def invalid(cls, error: E) -> V[E, Any]:
        """ Wraps an error in a failed Validation """
        return V(Invalid(error))

    @classmethod
    def fail(cls, message: T) -> V[Array[T], Any]:
        """ A failed Validation holding a single error in an Array """
        return cls.invalid(Array.pure(message))

    def is_valid(self) -> bool:
        """ Returns True if the Validation is valid (i.e., contains a Right) """
        return isinstance(self.either, Valid)

    def to_either(self) -> Either[E, R]:
        """ Forget accumulation: the underlying Either """
        return self.either

    def __repr__(self):
        return f"V({self.either!r})"


def validate(predicate: Callable[[T], bool], message: S, value: T) \
    -> V[Array[S], T]:
    """
    Valid value when predicate holds, otherwise a single error message.
    """
    return V.pure(value) if predicate(value) else V.fail(message)
