"""Application engine for Sprig.

Centralizes procedure application for the evaluator:
- Closures bind their formals in a child of the captured scope.
- Supplying fewer arguments than a closure declares returns a new Closure
  awaiting the remaining formals (curried application).
- Builtins are resolved by key through the builtin dispatch table.
"""

from __future__ import annotations

import logging

from sprig import LispValue, EvaluatorFn
from sprig.builtin.env_builtin import call_builtin
from sprig.printer import to_string
from sprig.runtime_context import is_verbose
from sprig.types.builtin_ref import Builtin
from sprig.types.closure import Closure
from sprig.types.errors import SprigTypeError

logger = logging.getLogger(__name__)


def apply_closure(fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Closure to already-evaluated arguments.

    - Exactly `arity` arguments: evaluate the body in the new scope.
    - Fewer: return a Closure over the partial bindings expecting the rest.
    - More: Closure.bind raises SprigArityError.
    """
    new_env = fn.bind(args)
    if len(args) < fn.arity:
        return Closure(fn.formals[len(args):], fn.body, new_env)
    return evaluate_fn(fn.body, new_env)


def apply(proc: LispValue, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply either a Closure or a Builtin; anything else is a type error."""
    if is_verbose():
        logger.debug("apply %s to (%s)", to_string(proc), " ".join(to_string(a) for a in args))

    match proc:
        case Closure():
            return apply_closure(proc, args, evaluate_fn)
        case Builtin(name):
            return call_builtin(name, args)
        case _:
            raise SprigTypeError(f"Cannot apply non-procedure {to_string(proc)}")
