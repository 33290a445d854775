"""Built-in procedures for the Sprig runtime environment.

This module defines the integer arithmetic, comparison, pair and predicate
primitives, the dispatch table that maps each builtin key to its function, and
the registration helper that binds them in a root Environment.
"""
from __future__ import annotations
from typing import Callable

from sprig import LispValue
from sprig.printer import to_string
from sprig.types.builtin_ref import Builtin
from sprig.types.environment import Environment
from sprig.types.errors import SprigArithmeticError, SprigArityError, SprigTypeError
from sprig.types.nil import Nil
from sprig.types.pair import Pair, is_equal
from sprig.types.symbol import Symbol


def _is_number(value: LispValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _numbers(op: str, args: list[LispValue]) -> list[int]:
    for arg in args:
        if not _is_number(arg):
            raise SprigTypeError(f"{op}: expected a number, got {to_string(arg)}")
    return args


def _exactly(op: str, n: int, args: list[LispValue]) -> None:
    if len(args) != n:
        raise SprigArityError(f"{op} requires exactly {n} argument(s), got {len(args)}")


def _quotient(op: str, n: int, d: int) -> int:
    """Integer division truncating toward zero."""
    if d == 0:
        raise SprigArithmeticError(f"{op}: division by zero")
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> LispValue:
    """Return the sum of all arguments."""
    return sum(_numbers("+", args))


def sub(args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise SprigArityError("- requires at least 1 argument")
    first, *rest = _numbers("-", args)
    if not rest:
        return -first
    return first - sum(rest)


def mul(args: list[LispValue]) -> LispValue:
    """Return the product of all arguments."""
    result = 1
    for x in _numbers("*", args):
        result *= x
    return result


def div(args: list[LispValue]) -> LispValue:
    """Divide left-to-right with truncating integer division."""
    if len(args) < 2:
        raise SprigArityError("/ requires at least 2 arguments")
    result, *rest = _numbers("/", args)
    for x in rest:
        result = _quotient("/", result, x)
    return result


def mod(args: list[LispValue]) -> LispValue:
    """(mod n d): remainder of truncating division; takes the sign of n."""
    _exactly("mod", 2, args)
    n, d = _numbers("mod", args)
    return n - d * _quotient("mod", n, d)


def num_eq(args: list[LispValue]) -> bool:
    _exactly("=", 2, args)
    a, b = _numbers("=", args)
    return a == b


def lt(args: list[LispValue]) -> bool:
    _exactly("<", 2, args)
    a, b = _numbers("<", args)
    return a < b


def gt(args: list[LispValue]) -> bool:
    _exactly(">", 2, args)
    a, b = _numbers(">", args)
    return a > b


# -------------------------------
# Pairs and lists
# -------------------------------
def cons(args: list[LispValue]) -> Pair:
    _exactly("cons", 2, args)
    return Pair(args[0], args[1])


def head(args: list[LispValue]) -> LispValue:
    _exactly("head", 1, args)
    (xs,) = args
    if not isinstance(xs, Pair):
        raise SprigTypeError(f"head: expected a pair, got {to_string(xs)}")
    return xs.first


def tail(args: list[LispValue]) -> LispValue:
    _exactly("tail", 1, args)
    (xs,) = args
    if not isinstance(xs, Pair):
        raise SprigTypeError(f"tail: expected a pair, got {to_string(xs)}")
    return xs.second


def list_builtin(args: list[LispValue]) -> LispValue:
    return Pair.from_iterable(args)


# -------------------------------
# Predicates
# -------------------------------
def is_nil(args: list[LispValue]) -> bool:
    _exactly("nil?", 1, args)
    return args[0] is Nil


def equal(args: list[LispValue]) -> bool:
    """Structural equality over any two values."""
    _exactly("eq?", 2, args)
    return is_equal(args[0], args[1])


def logical_not(args: list[LispValue]) -> bool:
    _exactly("not", 1, args)
    return args[0] is False


BUILTINS: dict[str, Callable[[list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "mod": mod,
    "=": num_eq,
    "<": lt,
    ">": gt,
    "cons": cons,
    "head": head,
    "tail": tail,
    "list": list_builtin,
    "nil?": is_nil,
    "eq?": equal,
    "not": logical_not,
}


def call_builtin(name: str, args: list[LispValue]) -> LispValue:
    """Dispatch a builtin by key over already-evaluated arguments."""
    try:
        fn = BUILTINS[name]
    except KeyError:
        raise SprigTypeError(f"Unknown builtin {name}") from None
    return fn(args)


def register(env: Environment) -> None:
    """Bind every builtin under its own name in `env`."""
    env.update({Symbol(name): Builtin(name) for name in BUILTINS})
