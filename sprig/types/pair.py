"""Cons cells and the list helpers built on them.

Lists are right-nested Pairs terminated by Nil. Equality is structural and
never coerces between booleans and numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from sprig import LispValue
from sprig.types.errors import SprigEvaluationError
from sprig.types.nil import Nil


@dataclass(eq=False, slots=True)
class Pair:
    first: LispValue
    second: LispValue

    @classmethod
    def from_iterable(cls, items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
        """Build a right-nested list of `items` ending in `tail`."""
        result = tail
        for item in reversed(list(items)):
            result = cls(item, result)
        return result

    def __iter__(self) -> Iterator[LispValue]:
        cell: LispValue = self
        while isinstance(cell, Pair):
            yield cell.first
            cell = cell.second

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Pair) and is_equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        from sprig.printer import to_string
        return to_string(self)


def is_list(value: LispValue) -> bool:
    """True for Nil and for Pair chains terminated by Nil."""
    while isinstance(value, Pair):
        value = value.second
    return value is Nil


def to_list(value: LispValue, what: str = "form") -> list[LispValue]:
    """Return the elements of a proper list, or fail naming `what`."""
    if not is_list(value):
        raise SprigEvaluationError(f"Malformed {what}: expected a proper list, got {value}")
    return list(value) if isinstance(value, Pair) else []


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality; walks list spines iteratively."""
    while isinstance(a, Pair) and isinstance(b, Pair):
        if a is b:
            return True
        if not is_equal(a.first, b.first):
            return False
        a, b = a.second, b.second
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    if isinstance(a, Pair) or isinstance(b, Pair):
        return False
    return a == b
