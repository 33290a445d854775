"""Core evaluator for the Sprig interpreter.

Dispatches on the shape of an expression: symbols are looked up, pairs headed
by a special-form keyword are handed to that form, any other pair is a
procedure application, and every other value evaluates to itself.
"""

from __future__ import annotations

import logging

from sprig import SExpression, LispValue
from sprig.evaluation.apply import apply
from sprig.evaluation.special_forms import SPECIAL_FORMS
from sprig.printer import to_string
from sprig.runtime_context import is_verbose
from sprig.types.environment import Environment
from sprig.types.pair import Pair, to_list
from sprig.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    if is_verbose():
        logger.debug("eval %s", to_string(expr))

    match expr:
        case Symbol():
            return env.lookup(expr)
        case Pair(Symbol() as head, tail) if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](to_list(tail, f"{head} form"), env, evaluate)
        case Pair(head, tail):
            proc = evaluate(head, env)
            args = [evaluate(arg, env) for arg in to_list(tail, "application")]
            return apply(proc, args, evaluate)
        case _:
            # Numbers, booleans, Nil, closures and builtins are self-evaluating.
            return expr
