from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.evaluation.special_forms.begin_form import make_body
from sprig.types.environment import Environment
from sprig.types.errors import SprigArityError, SprigInvalidSymbol, SprigEvaluationError
from sprig.types.pair import to_list
from sprig.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let ((name value) ...) body...)

    All names are reserved in the new scope before any value is evaluated, and
    the values are evaluated inside that scope, so a lambda bound early in the
    list can refer to a name bound later in it.
    """
    if not tail:
        raise SprigArityError("let requires a binding list")

    bindings = []
    for binding in to_list(tail[0], "let binding list"):
        pair = to_list(binding, "let binding")
        if len(pair) != 2:
            raise SprigEvaluationError("let binding must be (name value)")
        name, val_expr = pair
        if not isinstance(name, Symbol):
            raise SprigInvalidSymbol(f"Cannot bind {name} as a symbol")
        bindings.append((name, val_expr))

    scope = env.child()
    scope.reserve(name for name, _ in bindings)
    for name, val_expr in bindings:
        scope.define(name, evaluate_fn(val_expr, scope))

    return evaluate_fn(make_body(tail[1:]), scope)
