import pytest
from hypothesis import given, strategies as st

from sprig.interpreter import Interpreter, parse_and_eval
from sprig.types import Closure, Symbol
from sprig.types.errors import SprigArityError


def test_single_curry():
    assert parse_and_eval("(((lambda (x y) y) 1) 2)") == 2


def test_double_curry():
    assert parse_and_eval("((((lambda (x y z) z) 1) 2) 3)") == 3


def test_partial_application_returns_closure_awaiting_rest():
    partial = parse_and_eval("((lambda (x y) y) 1)")
    assert isinstance(partial, Closure)
    assert partial.formals == [Symbol("y")]


def test_partial_application_does_not_mutate_original(interp):
    interp.eval("(define add (lambda (a b) (+ a b)))")
    interp.eval("(define add5 (add 5))")
    interp.eval("(define add7 (add 7))")
    assert interp.eval("(add5 1)") == 6
    assert interp.eval("(add7 1)") == 8
    assert interp.eval("(add 1 2)") == 3
    assert interp.env.lookup(Symbol("add")).formals == [Symbol("a"), Symbol("b")]


def test_mixed_step_sizes(interp):
    interp.eval("(define f (lambda (a b c d) (- (- a b) (- c d))))")
    assert interp.eval("((f 10 1) 4 2)") == 7
    assert interp.eval("(((f 10) 1 4) 2)") == 7


def test_zero_arity_call():
    assert parse_and_eval("((lambda () 42))") == 42


def test_too_many_arguments():
    with pytest.raises(SprigArityError):
        parse_and_eval("((lambda (x) x) 1 2)")


def test_too_many_arguments_after_partial():
    with pytest.raises(SprigArityError):
        parse_and_eval("(((lambda (x y) y) 1) 2 3)")


@given(st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1, max_size=6))
def test_currying_equivalence(values):
    params = " ".join(f"p{i}" for i in range(len(values)))
    body = "(+ " + params + ")" if len(values) > 1 else "p0"
    fn = f"(lambda ({params}) (cons {body} (list {params})))"
    all_at_once = f"({fn} {' '.join(map(str, values))})"
    one_at_a_time = fn
    for v in values:
        one_at_a_time = f"({one_at_a_time} {v})"
    interp = Interpreter()
    assert interp.eval(all_at_once) == interp.eval(one_at_a_time)
