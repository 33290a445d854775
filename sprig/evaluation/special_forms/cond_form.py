"""Special form: cond.

(cond (test result...) ...)

Clauses are tried in order. The first clause whose test is truthy has its
result forms evaluated in sequence and the last value returned; a clause with
only a test returns the test's value. The symbol `else` always matches.
Falling off the end is an error.
"""

from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.evaluation.special_forms.if_form import is_truthy
from sprig.types.environment import Environment
from sprig.types.errors import SprigEvaluationError
from sprig.types.pair import to_list
from sprig.types.symbol import Symbol

ELSE = Symbol("else")


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    for clause in tail:
        forms = to_list(clause, "cond clause")
        if not forms:
            raise SprigEvaluationError("cond clause must have a test")
        test, *body = forms

        test_val = True if test == ELSE else evaluate_fn(test, env)
        if not is_truthy(test_val):
            continue

        result = test_val
        for expr in body:
            result = evaluate_fn(expr, env)
        return result

    raise SprigEvaluationError("cond: no clause matched")
