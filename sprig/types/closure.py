"""User-defined procedure values and their argument binding."""

from __future__ import annotations

from io import StringIO

from sprig import SExpression, LispValue
from sprig.types.environment import Environment
from sprig.types.errors import SprigArityError
from sprig.types.symbol import Symbol


class Closure:
    """A first-class lambda with formal parameters, body, and captured env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.formals)

    def bind(self, args: list[LispValue]) -> Environment:
        """
        Bind the leading formals to `args` in a child of the captured scope.

        Supplying fewer arguments than formals is allowed (the caller curries);
        supplying more is an arity error.
        """
        if len(args) > len(self.formals):
            raise SprigArityError(
                f"{self} expects {len(self.formals)} argument(s), got {len(args)}"
            )
        new_env = self.env.child()
        for name, value in zip(self.formals, args):
            new_env.define(name, value)
        return new_env

    def __str__(self) -> str:
        from sprig.printer import to_string
        with StringIO() as buffer:
            buffer.write("(λ (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(to_string(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the closure."""
        return str(self)
