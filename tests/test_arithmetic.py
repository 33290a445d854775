import pytest

from sprig.builtin.env_builtin import BUILTINS, call_builtin
from sprig.evaluation.evaluator import evaluate
from sprig.reader.parser import parse
from sprig.types import Builtin, Nil, Pair, Symbol
from sprig.types import errors


def run(source, env):
    return evaluate(parse(source), env)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(- (/ (+ (* 7 8) 4) 2) 3)", 27),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(+ -1 5 -3)", 1),
        ("(- 5)", -5),
        ("(+)", 0),
        ("(*)", 1),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(mod 5 2)", 1),
        ("(mod -7 2)", -1),
        ("(mod 7 -2)", 1),
        ("(mod 20 6)", 2),
        ("(* 99999999999 99999999999)", 9999999999800000000001),
    ]
)
def test_lisp_arithmetic(env, source, expected):
    assert run(source, env) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", True),
        ("(= 1 2)", False),
        ("(< 1 2)", True),
        ("(> 1 2)", False),
        ("(nil? #nil)", True),
        ("(nil? '())", True),
        ("(nil? '(1))", False),
        ("(nil? #false)", False),
        ("(not #false)", True),
        ("(not #nil)", False),
        ("(eq? '(1 (2 3)) '(1 (2 3)))", True),
        ("(eq? '(1 2) '(1 3))", False),
        ("(eq? 'a 'a)", True),
        ("(eq? #true 1)", False),
    ]
)
def test_predicates(env, source, expected):
    assert run(source, env) is expected


def test_pairs(env):
    assert run("(cons 1 2)", env) == Pair(1, 2)
    assert run("(head (cons 1 2))", env) == 1
    assert run("(tail (cons 1 2))", env) == 2
    assert run("(tail '(1))", env) is Nil
    assert run("(list 1 2 3)", env) == Pair.from_iterable([1, 2, 3])
    assert run("(list)", env) is Nil
    assert run("(cons 1 (cons 2 #nil))", env) == run("'(1 2)", env)


@pytest.mark.parametrize(
    "source,error",
    [
        ("(head 1)", errors.SprigTypeError),
        ("(tail #nil)", errors.SprigTypeError),
        ("(+ 1 'a)", errors.SprigTypeError),
        ("(+ 1 #true)", errors.SprigTypeError),
        ("(= 'a 'a)", errors.SprigTypeError),
        ("(cons 1)", errors.SprigArityError),
        ("(mod 1)", errors.SprigArityError),
        ("(-)", errors.SprigArityError),
        ("(/ 4)", errors.SprigArityError),
        ("(/ 1 0)", errors.SprigArithmeticError),
        ("(mod 1 0)", errors.SprigArithmeticError),
    ]
)
def test_builtin_errors(env, source, error):
    with pytest.raises(error):
        run(source, env)


def test_error_message_names_operation(env):
    with pytest.raises(errors.SprigTypeError, match="head"):
        run("(head 1)", env)


def test_every_builtin_is_registered(env):
    for name in BUILTINS:
        assert env.lookup(Symbol(name)) == Builtin(name)


def test_unknown_builtin_key():
    with pytest.raises(errors.SprigTypeError):
        call_builtin("no-such-builtin", [])
