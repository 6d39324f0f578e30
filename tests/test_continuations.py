import pytest

from parsley.errors import ArityError, ParsleyTypeError, UndefinedSymbolError
from parsley.types import Cont, Environment


def test_root_node_has_empty_env(core_ctx):
    assert core_ctx.cont.parent is None
    assert len(core_ctx.cont.env) == 0
    assert core_ctx.cont.depth() == 0


def test_push_without_env_is_a_noop(core_ctx):
    before = core_ctx.cont
    core_ctx.push_cont(None)
    assert core_ctx.cont is before


def test_push_links_to_previous_node(core_ctx):
    root = core_ctx.cont
    env = Environment({"a": 1.0})
    core_ctx.push_cont(env)
    assert core_ctx.cont.parent is root
    assert core_ctx.cont.env is env
    core_ctx.push_cont(Environment())
    assert core_ctx.cont.depth() == 2
    core_ctx.pop_cont()
    core_ctx.pop_cont()
    assert core_ctx.cont is root


def test_pop_at_root_yields_fresh_empty_node(core_ctx):
    root = core_ctx.cont
    core_ctx.pop_cont()
    assert core_ctx.cont is not root
    assert core_ctx.cont.parent is None
    assert len(core_ctx.cont.env) == 0


def test_closure_scope_restores_on_error(core_ctx):
    root = core_ctx.cont
    with pytest.raises(RuntimeError):
        with core_ctx.closure_scope(Environment({"a": 1.0})):
            assert core_ctx.get("a") == 1.0
            raise RuntimeError("boom")
    assert core_ctx.cont is root
    assert core_ctx.get("a") is None


def test_caller_scope_sees_parent_node(core_ctx):
    core_ctx.push_cont(Environment({"a": 1.0}))
    core_ctx.push_cont(Environment({"a": 2.0}))
    with core_ctx.caller_scope():
        assert core_ctx.get("a") == 1.0
    assert core_ctx.get("a") == 2.0


def test_nodes_can_be_shared_by_several_children():
    root = Cont()
    a = Cont(root, Environment({"x": 1.0}))
    b = Cont(root, Environment({"x": 2.0}))
    assert a.parent is b.parent


def test_failed_call_restores_continuation(ctx):
    ctx.run("(define (f x) (car x))")
    root = ctx.cont
    with pytest.raises(ParsleyTypeError):
        ctx.run("(f 1)")
    assert ctx.cont is root
    with pytest.raises(ArityError):
        ctx.run("(f)")
    assert ctx.cont is root
    assert len(ctx.user) == 1


def test_closure_body_resolves_against_definition_site(ctx):
    ctx.run(
        """
        (define (make-adder n) (lambda (x) (+ x n)))
        (define add5 (make-adder 5))
        """
    )
    # n is gone from every user scope, only the closure still carries it
    with pytest.raises(UndefinedSymbolError):
        ctx.run("n")
    assert ctx.run("(add5 10)") == 15


def test_closure_scope_survives_library_calls_in_body(ctx):
    ctx.run(
        """
        (define (make f n) (lambda () (begin (display "") (f n))))
        (define g (make (lambda (v) (* v 2)) 21))
        """
    )
    with ctx.capture():
        assert ctx.run("(g)") == 42


def test_arguments_use_caller_visibility(ctx):
    ctx.run(
        """
        (define (make-show x) (lambda (y) (list x y)))
        (define show (make-show 1))
        (define (call-with x) (show x))
        """
    )
    # the x passed along is the caller's x, not the closure's x
    assert ctx.run("(call-with 5)") == ctx.run("'(1 5)")


def test_nested_closures_carry_outer_bindings(ctx):
    ctx.run("(define f (lambda (a) (lambda (b) (lambda (c) (+ a b c)))))")
    assert ctx.run("(((f 1) 2) 3)") == 6
