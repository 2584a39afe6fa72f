"""Test the Identity container using pytest."""
import pytest

from pyapply.errors import NotCallableError
from pyapply.identity import Container, Identity


def test_container_is_identity():
    assert Container is Identity
    assert Container.of(3) == Identity(3)


def test_map_is_derived_from_apply():
    assert Identity(2).map(lambda x: x + 1) == Identity(3)
    assert (str & Identity(2)).extract() == "2"


def test_apply_and_bind():
    assert Identity(lambda x: x * 2) * Identity(4) == Identity(8)
    assert Identity(4) >> (lambda x: Identity(x - 1)) == Identity(3)


def test_operations_return_new_containers():
    original = Identity([1])
    mapped = original.map(lambda xs: xs + [2])
    assert original == Identity([1])
    assert mapped == Identity([1, 2])


def test_apply_requires_a_function():
    with pytest.raises(NotCallableError):
        Identity(1).ap(Identity(2))
