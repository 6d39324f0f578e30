"""The lambda special form and compound procedures.

A compound procedure closes over a snapshot of the free variables of its body
that live in local (non-global) scopes, taken with `Context.close` when the
lambda is evaluated. Globals stay live: they are resolved at call time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from parsley import SExpression, LispValue
from parsley.errors import ParsleyTypeError
from parsley.evaluation.special_forms.begin_form import eval_sequence
from parsley.types.environment import Environment
from parsley.types.procedure import Arity, Procedure
from parsley.types.sexp import Null, Pair, Vector
from parsley.types.symbol import Symbol

if TYPE_CHECKING:
    from parsley.context import Context

QUOTE = Symbol("quote")
LAMBDA = Symbol("lambda")
LET = Symbol("let")


def parse_params(params: SExpression) -> tuple[list[str], Optional[str]]:
    """Split a lambda list into positional names and an optional rest name.

    (a b) -> ([a, b], None); (a . rest) -> ([a], rest); args -> ([], args)
    """
    names: list[str] = []
    node = params
    while isinstance(node, Pair):
        if not isinstance(node.head, Symbol):
            raise ParsleyTypeError("symbol", str(node.head))
        names.append(node.head.id)
        node = node.tail
    if node is Null:
        return names, None
    if isinstance(node, Symbol):
        return names, node.id
    raise ParsleyTypeError("symbol", str(node))


def free_variables(expr: SExpression, bound: frozenset[str] = frozenset()) -> set[str]:
    """Names referenced by `expr` that are not bound inside it.

    Quoted data is skipped; lambda and let introduce new bound names.
    """
    if isinstance(expr, Symbol):
        return set() if expr.id in bound else {expr.id}
    if not isinstance(expr, Pair):
        # Atoms and vectors are self-evaluating
        return set()

    head = expr.head
    if head == QUOTE:
        return set()
    if head == LAMBDA and isinstance(expr.tail, Pair):
        names, rest = parse_params(expr.tail.head)
        inner = bound | set(names) | ({rest} if rest else set())
        return _free_in_body(expr.tail.tail, frozenset(inner))
    if head == LET and isinstance(expr.tail, Pair):
        found: set[str] = set()
        names = []
        bindings = expr.tail.head if isinstance(expr.tail.head, Pair) else Null
        for binding in bindings:
            if isinstance(binding, Pair) and isinstance(binding.head, Symbol):
                names.append(binding.head.id)
                found |= _free_in_body(binding.tail, bound)
        return found | _free_in_body(expr.tail.tail, bound | frozenset(names))
    return _free_in_body(expr, bound)


def _free_in_body(body: SExpression, bound: frozenset[str]) -> set[str]:
    found: set[str] = set()
    node = body
    while isinstance(node, Pair):
        found |= free_variables(node.head, bound)
        node = node.tail
    if node is not Null and not isinstance(node, Vector):
        found |= free_variables(node, bound)
    return found


def capture(ctx: Context, names: set[str]) -> Environment:
    """Snapshot the local bindings of `names` visible from the current scope.

    Names bound in an enclosing closure (the current continuation node) are
    carried forward so that nested closures keep them.
    """
    local = [n for n in sorted(names) if n not in ctx.core and ctx.resolve_frame(n) not in (None, 0)]
    env = ctx.close(local)
    for name in sorted(names):
        value = ctx.cont.env.get(name)
        if value is not None:
            env.insert(name, value)
    return env


def make_lambda(
    ctx: Context, params: SExpression, body: SExpression, name: Optional[str] = None
) -> Procedure:
    formals, rest = parse_params(params)
    bound = frozenset(formals) | (frozenset([rest]) if rest else frozenset())
    env = capture(ctx, _free_in_body(body, bound))

    def call(ctx: Context, args: SExpression) -> LispValue:
        # Argument expressions belong to the caller, not to this closure
        with ctx.caller_scope():
            values = [ctx.eval(a) for a in args]
        with ctx.procedure_frame() as frame:
            for formal, value in zip(formals, values):
                frame.insert(formal, value)
            if rest is not None:
                rest_list: SExpression = Null
                for value in reversed(values[len(formals):]):
                    rest_list = Pair(value, rest_list)
                frame.insert(rest, rest_list)
            return eval_sequence(ctx, body)

    arity = Arity.at_least(len(formals)) if rest is not None else Arity.exact(len(formals))
    return Procedure.ctx(call, arity, name=name, env=env)


def lambda_form(ctx: Context, tail: SExpression) -> LispValue:
    """(lambda (params...) body...)

    The body is an implicit begin. `params` may be a proper list, a dotted
    list with a rest parameter, or a single symbol collecting all arguments.
    """
    return make_lambda(ctx, tail.head, tail.tail)
