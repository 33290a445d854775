from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.types.errors import SprigArityError
from sprig.types.environment import Environment
from sprig.types.nil import Nil


def is_truthy(value: LispValue) -> bool:
    # Only #false is false; 0 and #nil count as true.
    return value is not False


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise SprigArityError("if requires a condition, a then-expression and an optional else-expression")

    if is_truthy(evaluate_fn(tail[0], env)):
        return evaluate_fn(tail[1], env)
    elif len(tail) == 3:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
