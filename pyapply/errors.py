"""
Exceptions raised by the containers themselves.
Absence and failure inside a container are values (Nothing, Left),
not exceptions; these cover contract violations and Task rejection.
"""
from typing import Any


class NotCallableError(TypeError):
    """ap was called on a container that does not wrap a function."""

    def __init__(self, variant: str, value: Any):
        super().__init__(
            f"{variant} must wrap a function to be applied, "
            f"got {type(value).__name__}")
        self.variant = variant
        self.value = value


class TaskRejected(Exception):
    """Raised inside a Task to reject it with an arbitrary error value."""
    __slots__ = ("error",)

    def __init__(self, error: Any):
        super().__init__(error)
        self.error = error


def require_callable(variant: str, f: Any) -> None:
    """
    Guard used by native ap implementations
    before applying the wrapped function.
    """
    if not callable(f):
        raise NotCallableError(variant, f)
