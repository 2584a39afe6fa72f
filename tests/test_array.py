"""Test Array as monoid, applicative and traversable using pytest."""
from operator import add

import pytest

from pyapply.array import Array
from pyapply.curry import curry2
from pyapply.either import Left, Right
from pyapply.maybe import Just, Nothing
from pyapply.task import Task
from pyapply.validation import V


def test_apply_is_cartesian_product():
    fs = Array.of_items(lambda x: x + 1, lambda x: x * 10)
    assert fs * Array.of_items(1, 2) == Array.of_items(2, 3, 10, 20)
    assert (curry2(add) & Array.of_items(1, 2)) * Array.of_items(10, 20) \
        == Array.of_items(11, 21, 12, 22)


def test_apply_with_empty_side_is_empty():
    assert Array.mempty() * Array.of_items(1, 2) == Array.mempty()
    assert Array.pure(abs) * Array.mempty() == Array.mempty()


def test_bind_flattens():
    assert Array.of_items(1, 2) >> (lambda x: Array.of_items(x, x)) \
        == Array.of_items(1, 1, 2, 2)


def test_monoid_and_fold():
    assert Array.mempty() + Array.pure(1) == Array.pure(1)
    xs = Array.of_items(1, 2, 3)
    assert xs.foldl(lambda acc, x: acc - x, 0) == -6
    assert xs.length == len(xs) == 3
    assert list(xs) == [1, 2, 3]
    assert repr(xs) == "[1, 2, 3]"


def test_traverse_maybe():
    half = lambda x: Just(x // 2) if x % 2 == 0 else Nothing
    assert Array.of_items(2, 4).traverse(half) == Just(Array.of_items(1, 2))
    assert Array.of_items(2, 3).traverse(half) is Nothing


def test_sequence_either_stops_at_first_left():
    xs = Array.of_items(Right(1), Left("a"), Left("b"))
    assert xs.sequence() == Left("a")


def test_sequence_validation_collects_all_errors():
    xs = Array.of_items(V.fail("a"), V.pure(1), V.fail("b"))
    assert xs.sequence().validity == Left(Array.of_items("a", "b"))


def test_traverse_task_keeps_order():
    task = Array.of_items(1, 2, 3).traverse(
        lambda x: Task.sleep(0.01 * (4 - x), x * 2))
    assert task.run_sync() == Array.of_items(2, 4, 6)


def test_traverse_empty_needs_pure():
    with pytest.raises(ValueError):
        Array.mempty().traverse(Just)
    assert Array.mempty().traverse(Just, Just.pure) == Just(Array.mempty())
