from __future__ import annotations
import sys


class Symbol:
    """A name, used both as an identifier and as quoted atomic data.

    Names are interned, so two symbols are equal exactly when they share the
    same interned string.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id is other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
