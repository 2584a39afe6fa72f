"""Test the error accumulating Validation applicative using pytest."""
import pytest

from pyapply.array import Array
from pyapply.curry import curry3
from pyapply.either import Left, Right
from pyapply.errors import NotCallableError
from pyapply.lift import lift_a3
from pyapply.string import String
from pyapply.validation import V, validate


def user(name, age, email):
    return {"name": name, "age": age, "email": email}


def check_name(name):
    return validate(bool, "name is empty", name)

def check_age(age):
    return validate(lambda a: 0 <= a < 150, "age out of range", age)

def check_email(email):
    return validate(lambda e: "@" in e, "email has no @", email)


def test_all_valid():
    result = lift_a3(user, check_name("ann"), check_age(30),
                     check_email("ann@example.com"))
    assert result.is_valid()
    assert result.validity == Right(user("ann", 30, "ann@example.com"))


def test_errors_accumulate_in_order():
    result = (curry3(user) & check_name("")) * check_age(200) \
        * check_email("nowhere")
    assert not result.is_valid()
    assert result.validity == Left(Array.of_items(
        "name is empty", "age out of range", "email has no @"))


def test_either_keeps_only_first_error_for_comparison():
    result = lift_a3(user, check_name("").to_either(),
                     check_age(200).to_either(),
                     check_email("nowhere").to_either())
    assert result == Left(Array.of_items("name is empty"))


def test_string_errors_use_string_append():
    result = V.invalid(String("a")) * V.invalid(String("b"))
    assert result.validity == Left(String("ab"))


def test_apply_second():
    assert (V.pure(1) ^ V.pure(2)).validity == Right(2)
    assert (V.fail("x") ^ V.fail("y")).validity == Left(Array.of_items("x", "y"))


def test_apply_requires_a_function():
    with pytest.raises(NotCallableError):
        V.pure(1) * V.pure(2)
