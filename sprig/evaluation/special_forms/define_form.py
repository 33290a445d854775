from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.types.errors import SprigArityError, SprigInvalidSymbol
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current scope only and returns the bound value.
    """
    if len(tail) != 2:
        raise SprigArityError("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise SprigInvalidSymbol(f"Cannot define {name} as a symbol")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
