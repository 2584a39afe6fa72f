"""
Executable functor, applicative and monad laws.

Every law function builds both sides of its equation and returns a
LawResult. Deferred variants cannot be compared directly, so each law
takes an observe function that turns a container into a comparable
value (run an IO, run a Task and attempt it, ...). The default is to
compare the containers themselves.

    results = check_applicative(Just, Sample(x=3, f=inc, g=double,
                                             u=Just(inc), v=Just(double),
                                             w=Just(3)))
    validate_laws("Maybe", results)   # V(Right(...)) when all laws hold
"""
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
import logging
from typing import Any

from .array import Array
from .monad import comp, compose, identity
from .string import String
from .validation import V

logger = logging.getLogger(__name__)

type Observe = Callable[[Any], Any]
type Pure = Callable[[Any], Any]


class Law(str, Enum):
    """Names of the laws checked by this module"""
    FUNCTOR_IDENTITY = "functor identity"
    FUNCTOR_COMPOSITION = "functor composition"
    IDENTITY = "identity"
    HOMOMORPHISM = "homomorphism"
    INTERCHANGE = "interchange"
    COMPOSITION = "composition"
    MAP_APPLY = "map/apply equivalence"
    LEFT_IDENTITY = "left identity"
    RIGHT_IDENTITY = "right identity"
    ASSOCIATIVITY = "associativity"


@dataclass(frozen=True)
class LawResult:
    """Both observed sides of a law"""
    law: Law
    lhs: Any
    rhs: Any

    @property
    def holds(self) -> bool:
        """True when both sides are equal"""
        return self.lhs == self.rhs

    def describe(self) -> str:
        """One line summary"""
        verdict = "holds" if self.holds else f"{self.lhs!r} != {self.rhs!r}"
        return f"{self.law.value}: {verdict}"


@dataclass(frozen=True)
class Sample:
    """
    Inputs shared by the applicative laws.
    u and v wrap functions, w wraps a value, f and g are plain functions.
    """
    x: Any
    f: Callable[[Any], Any]
    g: Callable[[Any], Any]
    u: Any
    v: Any
    w: Any


def _observed(law: Law, lhs: Any, rhs: Any, observe: Observe) -> LawResult:
    result = LawResult(law, observe(lhs), observe(rhs))
    logger.debug("%s", result.describe())
    return result

# ===== Functor =====

def functor_identity(v: Any, observe: Observe = identity) -> LawResult:
    """ v.map(identity) == v """
    return _observed(Law.FUNCTOR_IDENTITY, v.map(identity), v, observe)

def functor_composition(v: Any, f: Callable, g: Callable,
                        observe: Observe = identity) -> LawResult:
    """ v.map(comp(f, g)) == v.map(g).map(f) """
    return _observed(Law.FUNCTOR_COMPOSITION,
                     v.map(comp(f, g)), v.map(g).map(f), observe)

# ===== Applicative =====

def applicative_identity(pure: Pure, v: Any,
                         observe: Observe = identity) -> LawResult:
    """ pure(identity) * v == v """
    return _observed(Law.IDENTITY, pure(identity) * v, v, observe)

def homomorphism(pure: Pure, f: Callable, x: Any,
                 observe: Observe = identity) -> LawResult:
    """ pure(f) * pure(x) == pure(f(x)) """
    return _observed(Law.HOMOMORPHISM,
                     pure(f) * pure(x), pure(f(x)), observe)

def interchange(pure: Pure, u: Any, x: Any,
                observe: Observe = identity) -> LawResult:
    """ u * pure(x) == pure(lambda g: g(x)) * u """
    return _observed(Law.INTERCHANGE,
                     u * pure(x), pure(lambda g: g(x)) * u, observe)

def composition(pure: Pure, u: Any, v: Any, w: Any,
                observe: Observe = identity) -> LawResult:
    """ pure(compose) * u * v * w == u * (v * w) """
    return _observed(Law.COMPOSITION,
                     pure(compose) * u * v * w, u * (v * w), observe)

def map_apply(pure: Pure, f: Callable, x: Any,
              observe: Observe = identity) -> LawResult:
    """ pure(x).map(f) == pure(f) * pure(x) """
    return _observed(Law.MAP_APPLY,
                     pure(x).map(f), pure(f) * pure(x), observe)

# ===== Monad =====

def left_identity(pure: Pure, k: Callable, x: Any,
                  observe: Observe = identity) -> LawResult:
    """ pure(x) >> k == k(x) """
    return _observed(Law.LEFT_IDENTITY, pure(x) >> k, k(x), observe)

def right_identity(pure: Pure, m: Any,
                   observe: Observe = identity) -> LawResult:
    """ m >> pure == m """
    return _observed(Law.RIGHT_IDENTITY, m >> pure, m, observe)

def associativity(m: Any, k: Callable, h: Callable,
                  observe: Observe = identity) -> LawResult:
    """ (m >> k) >> h == m >> (lambda x: k(x) >> h) """
    return _observed(Law.ASSOCIATIVITY,
                     (m >> k) >> h, m >> (lambda x: k(x) >> h), observe)

# ===== Suites =====

def check_functor(v: Any, f: Callable, g: Callable,
                  observe: Observe = identity) -> Array[LawResult]:
    """ Both functor laws for v """
    return Array.of_items(
        functor_identity(v, observe),
        functor_composition(v, f, g, observe),
    )

def check_applicative(pure: Pure, sample: Sample,
                      observe: Observe = identity) -> Array[LawResult]:
    """ The functor laws on w followed by the applicative laws """
    return check_functor(sample.w, sample.f, sample.g, observe) \
        + Array.of_items(
            applicative_identity(pure, sample.w, observe),
            homomorphism(pure, sample.f, sample.x, observe),
            interchange(pure, sample.u, sample.x, observe),
            composition(pure, sample.u, sample.v, sample.w, observe),
            map_apply(pure, sample.f, sample.x, observe),
        )

def check_monad(pure: Pure, m: Any, k: Callable, h: Callable, x: Any,
                observe: Observe = identity) -> Array[LawResult]:
    """ The three monad laws; k and h return containers """
    return Array.of_items(
        left_identity(pure, k, x, observe),
        right_identity(pure, m, observe),
        associativity(m, k, h, observe),
    )

def validate_laws(variant: str, results: Array[LawResult]) \
    -> V[Array[String], Array[LawResult]]:
    """
    Valid with all results when every law holds,
    otherwise Invalid with one message per broken law.
    """
    def check(result: LawResult) -> V[Array[String], LawResult]:
        if result.holds:
            return V.pure(result)
        logger.info("%s: %s", variant, result.describe())
        return V.fail(String(f"{variant}: {result.describe()}"))
    return results.traverse(check, V.pure)
