from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Builtin:
    """A primitive procedure, referenced by its key in the builtin dispatch table."""

    name: str

    def __str__(self) -> str:
        return f"#<builtin {self.name}>"
