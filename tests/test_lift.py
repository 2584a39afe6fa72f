"""Test the lift_aN helpers using pytest."""
from operator import add

from pyapply.either import Left, Right
from pyapply.lift import apply, lift_a2, lift_a3, lift_a4
from pyapply.maybe import Just, Nothing


def test_lift_a2_on_maybe():
    assert lift_a2(add, Just(2), Just(3)) == Just(5)
    assert lift_a2(add, Nothing, Just(3)) is Nothing
    assert lift_a2(add, Just(2), Nothing) is Nothing


def test_lift_a2_accepts_curried_function():
    curried_add = lambda a: lambda b: a + b
    assert lift_a2(curried_add, Just(2), Just(3)) == Just(5)


def test_lift_is_partially_applicable():
    add_maybes = lift_a2(add)
    assert add_maybes(Just(2), Just(3)) == Just(5)
    assert add_maybes(Just(2))(Just(3)) == Just(5)
    assert lift_a2(add, Right(1))(Right(2)) == Right(3)


def test_lift_a3_and_a4():
    assert lift_a3(lambda a, b, c: a + b + c, Just(1), Just(2), Just(3)) \
        == Just(6)
    assert lift_a4(lambda a, b, c, d: (a, b, c, d),
                   Right(1), Right(2), Left("x"), Left("y")) == Left("x")


def test_lift_a2_is_map_then_apply():
    f = lambda a: lambda b: a * b
    assert lift_a2(f, Just(4), Just(5)) == (f & Just(4)) * Just(5)
    assert apply(Just(str), Just(1)) == Just("1")


def test_lift_builtin_without_signature():
    assert lift_a2(max, Just(1), Just(2)) == Just(2)
    assert lift_a3(min, Right(4), Right(2), Right(3)) == Right(2)
    assert lift_a2(max, Nothing, Just(2)) is Nothing
