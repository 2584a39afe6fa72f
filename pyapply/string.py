""" String: text that can be used wherever a Monoid is expected """
from typing import Self


class String(str):
    """
    A str with append and mempty, so text can be the log of a Tuple
    or the error of a Validation.
    """
    def append(self, other: str) -> Self:
        return type(self)(f"{self}{other}")

    @classmethod
    def mempty(cls) -> Self:
        return cls()
