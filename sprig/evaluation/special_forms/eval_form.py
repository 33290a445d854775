from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.types.errors import SprigArityError
from sprig.types.environment import Environment


def eval_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(eval expr): evaluate expr, then evaluate the resulting value as code."""
    if len(tail) != 1:
        raise SprigArityError("eval expects exactly one argument")
    code = evaluate_fn(tail[0], env)
    return evaluate_fn(code, env)
