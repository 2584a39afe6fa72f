"""Test Maybe: Just, Nothing and helpers using pytest."""
from operator import add

import pytest

from pyapply.curry import curry2
from pyapply.errors import NotCallableError
from pyapply.maybe import Just, Nothing, from_maybe, maybe, to_maybe


def inc(x):
    return x + 1


def test_map_over_just_and_nothing():
    assert Just(2).map(inc) == Just(3)
    assert inc & Just(2) == Just(3)
    assert Nothing.map(inc) is Nothing
    assert inc & Nothing is Nothing


def test_apply_curried_function_one_argument_at_a_time():
    assert Just(curry2(add)) * Just(2) * Just(3) == Just(5)
    assert Just.pure(curry2(add)).ap(Just(2)).ap(Just(3)) == Just(5)


def test_apply_short_circuits_on_nothing():
    assert Just(inc) * Nothing is Nothing
    assert Nothing * Just(2) is Nothing
    assert Just(curry2(add)) * Nothing * Just(3) is Nothing


def test_pure_from_nothing_gives_just():
    assert Nothing.pure(3) == Just(3)
    assert Just.of(3) == Just(3)


def test_bind():
    half = lambda x: Just(x // 2) if x % 2 == 0 else Nothing
    assert Just(8) >> half >> half == Just(2)
    assert Just(6) >> half >> half is Nothing
    assert Nothing.chain(half) is Nothing


def test_apply_second_and_first():
    assert Just(1) ^ Just(2) == Just(2)
    assert Just(1).apply_first(Just(2)) == Just(1)
    assert Just(1) ^ Nothing is Nothing
    assert Nothing ^ Just(2) is Nothing


def test_apply_requires_a_function():
    with pytest.raises(NotCallableError):
        Just(3) * Just(4)


def test_equality_and_hash():
    assert Just(1) == Just(1)
    assert Just(1) != Just(2)
    assert Just(None) != Nothing
    assert len({Nothing, Nothing}) == 1
    assert not Nothing


def test_helpers():
    assert from_maybe(0, Just(5)) == 5
    assert from_maybe(0, Nothing) == 0
    assert maybe("none", str, Just(5)) == "5"
    assert maybe("none", str, Nothing) == "none"
    assert to_maybe(None) is Nothing
    assert to_maybe(0) == Just(0)


def test_repr():
    assert repr(Just("a")) == "Just('a')"
    assert repr(Nothing) == "Nothing"
