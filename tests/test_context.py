import pytest

from parsley.context import Context
from parsley.errors import UndefinedSymbolError
from parsley.types import Environment, Null, Procedure, Undefined


def test_default_context_only_has_core_forms(core_ctx):
    assert core_ctx.get("potato") is None
    assert core_ctx.get("+") is None
    assert isinstance(core_ctx.get("define"), Procedure)
    assert len(core_ctx.lang) == 0


def test_base_context_populates_lang(ctx):
    assert isinstance(ctx.get("+"), Procedure)
    assert ctx.get("null") is Null
    assert ctx.lang.contains("car")


def test_define_then_get(core_ctx):
    core_ctx.define("x", 3.0)
    assert core_ctx.get("x") == 3.0


def test_definition_visible_in_nested_scope(core_ctx):
    core_ctx.define("x", 1.0)
    core_ctx.push()
    assert core_ctx.get("x") == 1.0
    core_ctx.define("x", 2.0)
    assert core_ctx.get("x") == 2.0
    core_ctx.pop()
    assert core_ctx.get("x") == 1.0


def test_push_define_pop_discards_binding(core_ctx):
    assert core_ctx.get("x") is None
    core_ctx.push()
    core_ctx.define("x", Null)
    assert core_ctx.get("x") is Null
    core_ctx.pop()
    assert core_ctx.get("x") is None


def test_pop_last_frame_clears_everything(core_ctx):
    core_ctx.define("x", 1.0)
    assert len(core_ctx.user) == 1
    core_ctx.pop()
    assert len(core_ctx.user) == 1
    assert len(core_ctx.user[0]) == 0
    assert core_ctx.get("x") is None


def test_set_unknown_name_fails_without_creating_binding(core_ctx):
    with pytest.raises(UndefinedSymbolError):
        core_ctx.set("x", False)
    assert core_ctx.get("x") is None
    assert all(not frame.contains("x") for frame in core_ctx.user)


def test_set_updates_innermost_existing_binding(core_ctx):
    core_ctx.define("x", 3.0)
    core_ctx.push()
    assert core_ctx.set("x", "potato") is Undefined
    # no new binding in the inner frame
    assert not core_ctx.user[-1].contains("x")
    assert core_ctx.get("x") == "potato"
    core_ctx.pop()
    assert core_ctx.get("x") == "potato"


def test_set_does_not_touch_lang(ctx):
    with pytest.raises(UndefinedSymbolError):
        ctx.set("car", 1.0)
    assert isinstance(ctx.get("car"), Procedure)


def test_core_cannot_be_shadowed(core_ctx):
    define = core_ctx.get("define")
    core_ctx.define("define", 1.0)
    assert core_ctx.get("define") is define
    # set! only ever reaches the user binding
    core_ctx.set("define", 2.0)
    assert core_ctx.get("define") is define


def test_core_is_read_only(core_ctx):
    with pytest.raises(TypeError):
        core_ctx.core["define"] = 1.0


def test_user_definitions_override_lang(ctx):
    ctx.define("null", "foo")
    assert ctx.get("null") == "foo"
    ctx.pop()
    assert ctx.get("null") is Null


def test_continuation_env_is_checked_before_user_frames(core_ctx):
    core_ctx.define("x", 1.0)
    core_ctx.push_cont(Environment({"x": 2.0}))
    assert core_ctx.get("x") == 2.0
    core_ctx.pop_cont()
    assert core_ctx.get("x") == 1.0


def test_close_snapshots_requested_user_names_only(ctx):
    ctx.define("a", 1.0)
    ctx.push()
    ctx.define("b", 2.0)
    env = ctx.close(["a", "b", "missing", "car", "define"])
    assert env == Environment({"a": 1.0, "b": 2.0})
    # snapshot, not a live view
    ctx.set("a", 10.0)
    assert env.get("a") == 1.0


def test_close_ignores_continuation_bindings(core_ctx):
    core_ctx.push_cont(Environment({"z": 1.0}))
    assert len(core_ctx.close(["z"])) == 0


def test_resolve_frame(core_ctx):
    core_ctx.define("g", 1.0)
    core_ctx.push()
    core_ctx.define("l", 2.0)
    assert core_ctx.resolve_frame("g") == 0
    assert core_ctx.resolve_frame("l") == 1
    assert core_ctx.resolve_frame("nope") is None


def test_run_returns_last_value_and_keeps_definitions(ctx):
    with pytest.raises(UndefinedSymbolError):
        ctx.run("x")
    assert ctx.run("(define x 6)") is Undefined
    assert ctx.run("x") == 6
    assert ctx.run("") is Undefined
    assert ctx.run("(define y 1) (+ x y)") == 7


def test_capture_collects_output(ctx):
    with ctx.capture() as out:
        ctx.run('(display "hi") (newline) (write "hi")')
    assert out.getvalue() == 'hi\n"hi"'
    assert ctx.output is None


def test_output_defaults_to_stdout(ctx, capsys):
    ctx.run("(display 42)")
    assert capsys.readouterr().out == "42"


def test_load_runs_a_file(ctx, tmp_path):
    src = tmp_path / "defs.scm"
    src.write_text("(define (double x) (* 2 x))\n(double 21)\n", encoding="utf-8")
    assert ctx.load(src) == 42
    assert ctx.run("(double 4)") == 8


def test_recursion_limit_from_environment(monkeypatch):
    import sys

    previous = sys.getrecursionlimit()
    monkeypatch.setenv("PARSLEY_RECURSION_LIMIT", str(previous + 1000))
    try:
        Context()
        assert sys.getrecursionlimit() == previous + 1000
    finally:
        sys.setrecursionlimit(previous)


def test_procedure_frame_hides_local_frames_and_restores_them(ctx):
    ctx.define("g", 1.0)
    ctx.push()
    ctx.define("local", 2.0)
    stack = ctx.user
    with pytest.raises(ValueError):
        with ctx.procedure_frame() as frame:
            frame.insert("p", 3.0)
            assert ctx.get("g") == 1
            assert ctx.get("p") == 3
            assert ctx.get("local") is None
            raise ValueError("boom")
    assert ctx.user is stack
    assert ctx.get("local") == 2
