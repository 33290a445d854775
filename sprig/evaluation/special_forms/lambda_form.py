from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.evaluation.special_forms.begin_form import make_body
from sprig.types.closure import Closure
from sprig.types.environment import Environment
from sprig.types.errors import SprigArityError, SprigInvalidSymbol, SprigEvaluationError
from sprig.types.pair import to_list
from sprig.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body...) allows zero or more body forms.
    # Several forms become an implicit begin; none makes the call return #nil.
    if not tail:
        raise SprigArityError("lambda requires at least a parameter list")

    formals = to_list(tail[0], "lambda parameter list")
    for name in formals:
        if not isinstance(name, Symbol):
            raise SprigInvalidSymbol(f"lambda parameter {name} is not a symbol")
    if len(set(formals)) != len(formals):
        raise SprigEvaluationError("lambda parameters must be distinct")

    return Closure(formals, make_body(tail[1:]), env)
