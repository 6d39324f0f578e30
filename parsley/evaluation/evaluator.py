"""Core evaluator for the Parsley interpreter.

`evaluate` and `apply` are mutually recursive. `evaluate` resolves symbols and
decides, per call, whether the arguments of an application are evaluated
eagerly (PURE procedures) or passed through untouched (CTX procedures);
`apply` dispatches to the procedure inside its closure scope.

There is no trampoline: nesting depth is bounded by the host stack.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from parsley import LispValue, SExpression
from parsley.errors import NotAProcedureError, NullListError, UndefinedSymbolError
from parsley.types.procedure import ProcKind, Procedure
from parsley.types.sexp import Null, Pair
from parsley.types.symbol import Symbol
from parsley.types.undefined import Undefined

if TYPE_CHECKING:
    from parsley.context import Context

QUOTE = Symbol("quote")


def evaluate(expr: SExpression, ctx: Context) -> LispValue:
    """Evaluate `expr` in `ctx`."""
    match expr:
        case Pair(head=head, tail=tail):
            proc = evaluate(head, ctx)
            if isinstance(proc, Procedure) and proc.kind is ProcKind.CTX:
                args = tail
            else:
                # Left to right; the first failure aborts the whole application
                args = _build_list(evaluate(arg, ctx) for arg in tail)
            return apply(Pair(proc, args), ctx)
        case Symbol(id=name):
            value = ctx.get(name)
            if value is None or value is Undefined:
                raise UndefinedSymbolError(name)
            return value
        case _ if expr is Null:
            raise NullListError()

    # --- Atoms and vectors evaluate to themselves ---
    return expr


def apply(expr: SExpression, ctx: Context) -> LispValue:
    """Apply the head of `expr` to its tail.

    Anything that is not a pair is passed through unchanged, as is a pair whose
    head is neither a procedure, a symbol nor an unevaluated expression.
    """
    if not isinstance(expr, Pair):
        return expr

    head, tail = expr.head, expr.tail
    match head:
        case Procedure():
            head.check_arity(len(tail))
            # Pops only a node it pushed: procedures without a closure env push nothing
            with ctx.closure_scope(head.env):
                match head.kind:
                    case ProcKind.PURE:
                        return head.func(tail)
                    case ProcKind.CTX:
                        return head.func(ctx, tail)
        case Symbol(id=name):
            raise NotAProcedureError(name)
        case Pair():
            # e.g. an inline lambda expression in operator position
            return evaluate(Pair(evaluate(head, ctx), tail), ctx)
    return expr


def call_procedure(proc: LispValue, args: Iterable[LispValue], ctx: Context) -> LispValue:
    """Call `proc` with already-evaluated `args`.

    Used by library procedures such as `map` and `apply`. CTX procedures
    expect expressions, so each value is quoted before being handed over.
    """
    if isinstance(proc, Procedure) and proc.kind is ProcKind.CTX:
        args = (Pair(QUOTE, Pair(arg, Null)) for arg in args)
    return apply(Pair(proc, _build_list(args)), ctx)


def _build_list(values: Iterable[LispValue]) -> SExpression:
    items = list(values)
    result: SExpression = Null
    for item in reversed(items):
        result = Pair(item, result)
    return result
