# Printer: renders Sprig values back into surface syntax.

from __future__ import annotations

from sprig import LispValue
from sprig.types.nil import Nil
from sprig.types.pair import Pair
from sprig.types.symbol import Symbol


def to_string(value: LispValue) -> str:
    if isinstance(value, bool):
        return "#true" if value else "#false"
    if value is Nil:
        return "#nil"
    if isinstance(value, Pair):
        if value.first == Symbol("quote") and isinstance(value.second, Pair) and value.second.second is Nil:
            return "'" + to_string(value.second.first)
        parts = []
        cell: LispValue = value
        while isinstance(cell, Pair):
            parts.append(to_string(cell.first))
            cell = cell.second
        if cell is not Nil:
            parts.append(".")
            parts.append(to_string(cell))
        return "(" + " ".join(parts) + ")"
    return str(value)
