from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.types.environment import Environment
from sprig.types.nil import Nil
from sprig.types.pair import Pair
from sprig.types.symbol import Symbol

BEGIN = Symbol("begin")
DEFINE = Symbol("define")


def make_body(forms: list[SExpression]) -> SExpression:
    """Collapse body forms into one expression: Nil, the form itself, or (begin ...)."""
    if not forms:
        return Nil
    if len(forms) == 1:
        return forms[0]
    return Pair(BEGIN, Pair.from_iterable(forms))


def defined_names(forms: list[SExpression]) -> list[Symbol]:
    """Names introduced by `(define name ...)` forms directly in `forms`."""
    names = []
    for form in forms:
        if isinstance(form, Pair) and form.first == DEFINE:
            target = form.second
            if isinstance(target, Pair) and isinstance(target.first, Symbol):
                names.append(target.first)
    return names


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (begin form ...)
    Reserves every name the block defines, then evaluates the forms in order
    and returns the last value. Lambdas created early in the block may refer
    to names defined later in it.
    """
    env.reserve(defined_names(tail))
    result: LispValue = Nil
    for form in tail:
        result = evaluate_fn(form, env)
    return result
