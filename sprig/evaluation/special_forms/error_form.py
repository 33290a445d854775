from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.types.errors import SprigArityError, SprigUserError
from sprig.types.environment import Environment


def error_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(error payload): evaluate payload and abort with it."""
    if len(tail) != 1:
        raise SprigArityError("error expects exactly one argument")
    raise SprigUserError(evaluate_fn(tail[0], env))
