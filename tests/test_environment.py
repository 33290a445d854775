import pytest

from sprig.interpreter import parse_and_eval
from sprig.types import Environment, Symbol, Unassigned
from sprig.types.errors import SprigInvalidSymbol, SprigUnboundSymbol


def test_define_only_touches_current_scope():
    root = Environment()
    child = root.child()
    child.define(Symbol("x"), 1)
    assert child.lookup(Symbol("x")) == 1
    with pytest.raises(SprigUnboundSymbol):
        root.lookup(Symbol("x"))


def test_inner_binding_shadows_outer():
    root = Environment()
    root.define(Symbol("x"), 1)
    child = root.child()
    child.define(Symbol("x"), 2)
    assert child.lookup(Symbol("x")) == 2
    assert root.lookup(Symbol("x")) == 1


def test_lookup_walks_outward():
    root = Environment()
    root.define(Symbol("x"), 1)
    grandchild = root.child().child()
    assert grandchild.lookup(Symbol("x")) == 1
    assert grandchild.find(Symbol("x")) is root


def test_define_rejects_non_symbols():
    with pytest.raises(SprigInvalidSymbol):
        Environment().define("x", 1)


def test_reserve_skips_visible_names():
    root = Environment()
    root.define(Symbol("x"), 1)
    child = root.child()
    child.reserve([Symbol("x"), Symbol("y")])
    assert child.lookup(Symbol("x")) == 1
    assert child.vars[Symbol("y")] is Unassigned
    with pytest.raises(SprigUnboundSymbol):
        child.lookup(Symbol("y"))


def test_let_shadowing_does_not_leak():
    prog = """
    (define n 1)
    (define inner (let ((n 2)) n))
    (cons inner n)
    """
    result = parse_and_eval(prog)
    assert (result.first, result.second) == (2, 1)


def test_define_inside_lambda_does_not_leak():
    prog = """
    (define n 1)
    (define f (lambda () (define n 99) n))
    (cons (f) n)
    """
    result = parse_and_eval(prog)
    assert (result.first, result.second) == (99, 1)


def test_closures_share_captured_scope():
    prog = """
    (define make (lambda (x) (cons (lambda () x) (lambda (y) (define x y)))))
    (define p (make 1))
    ((tail p) 5)
    ((head p))
    """
    # The setter defines in its own call scope, so the getter still sees 1.
    assert parse_and_eval(prog) == 1


def test_redefining_builtin():
    assert parse_and_eval("(define + -) (+ 5 3)") == 2


def test_repr_mentions_bindings():
    root = Environment()
    child = root.child()
    child.define(Symbol("x"), 1)
    assert "x: 1" in repr(child)
    assert str(child).endswith("-> ...")


def test_symbols_compare_by_interned_name():
    built = "".join(["fo", "o"])
    assert Symbol(built) == Symbol("foo")
    assert hash(Symbol(built)) == hash(Symbol("foo"))
    assert Symbol("foo") != "foo"
    assert Symbol("foo") != Symbol("bar")
