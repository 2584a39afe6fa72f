""" imports for pyapply """
from .applicative import Applicative
from .array import Array
from .compose import Compose, compose_pure
from .curry import curry2, curry3, curry_n, arity
from .derive import map_from_apply, map_from_bind, apply_from_bind, \
    MapFromApply, DeriveFromBind
from .either import Either, Left, Right, try_either
from .errors import NotCallableError, TaskRejected
from .functor import Functor, map #pylint: disable=redefined-builtin
from .identity import Identity, Container
from .io import IO, defer
from .laws import Law, LawResult, Sample, check_functor, check_applicative, \
    check_monad, validate_laws
from .lift import apply, lift_a2, lift_a3, lift_a4
from .log import configure_logging
from .maybe import Maybe, Just, Nothing, from_maybe, to_maybe
from .monad import Monad, ap, comp
from .monoid import Monoid
from .semigroup import Semigroup
from .settings import Settings, get_settings
from .string import String
from .task import Task
from .tuple import Tuple, tell
from .validation import V, Valid, Invalid, validate
