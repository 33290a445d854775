"""Runtime environment for Sprig.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Scopes are ordinary Python objects, so a
scope lives as long as any Closure or evaluation frame still refers to it.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from sprig import LispValue
from sprig.types.errors import SprigInvalidSymbol, SprigUnboundSymbol
from sprig.types.symbol import Symbol


class UnassignedType:
    """Placeholder held by a reserved binding until its value is installed."""

    def __repr__(self):
        return "#<unassigned>"


Unassigned = UnassignedType()


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def child(self) -> Environment:
        """Create a new scope whose parent is this one."""
        return Environment(outer=self)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only, shadowing any outer binding.

        Raises SprigInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise SprigInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def reserve(self, names: Iterable[Symbol]) -> None:
        """Install placeholder cells for names that are not visible from here yet.

        Names that already resolve (a builtin, an outer variable, an earlier
        definition) keep resolving to their current value until redefined.
        """
        for name in names:
            if not isinstance(name, Symbol):
                raise SprigInvalidSymbol(f"Cannot define {name} as a symbol")
            if self.find(name) is None:
                self.vars[name] = Unassigned

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost scope first.

        Raises SprigUnboundSymbol if not found, or if the nearest binding is a
        reserved cell that has not received its value yet.
        """
        env = self.find(name)
        if env is None:
            raise SprigUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        value = env.vars[name]
        if value is Unassigned:
            raise SprigUnboundSymbol(f"Symbol {name} referenced before its definition")
        return value

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging; the root frame is summarised."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                if env.outer is None:
                    chain.append(f"<root: {len(env.vars)} bindings>")
                else:
                    env_buf = StringIO()
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
