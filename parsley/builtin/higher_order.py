"""Procedures that call other procedures: apply, map, filter and folds."""

from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import LispValue
from parsley.builtin.pairs import build_list, ensure_list
from parsley.builtin.utils import ctx_proc
from parsley.errors import NotAProcedureError
from parsley.evaluation.evaluator import call_procedure
from parsley.evaluation.special_forms.if_form import is_truthy
from parsley.printer import write_string
from parsley.types.procedure import Arity, Procedure

if TYPE_CHECKING:
    from parsley.context import Context


def _ensure_procedure(value: LispValue) -> Procedure:
    if not isinstance(value, Procedure):
        raise NotAProcedureError(write_string(value))
    return value


def apply_proc(ctx: Context, values: list[LispValue]) -> LispValue:
    """(apply f a b ... lst) calls f with a, b, ... followed by the elements of lst."""
    proc = _ensure_procedure(values[0])
    args = values[1:-1] + ensure_list(values[-1])
    return call_procedure(proc, args, ctx)


def map_proc(ctx: Context, values: list[LispValue]) -> LispValue:
    """(map f l1 l2 ...) stops at the shortest list."""
    proc = _ensure_procedure(values[0])
    lists = [ensure_list(v) for v in values[1:]]
    return build_list([call_procedure(proc, list(items), ctx) for items in zip(*lists)])


def filter_proc(ctx: Context, values: list[LispValue]) -> LispValue:
    proc = _ensure_procedure(values[0])
    return build_list([v for v in ensure_list(values[1]) if is_truthy(call_procedure(proc, [v], ctx))])


def foldl(ctx: Context, values: list[LispValue]) -> LispValue:
    """(foldl f init lst): (f elem acc) from the left."""
    proc = _ensure_procedure(values[0])
    acc = values[1]
    for v in ensure_list(values[2]):
        acc = call_procedure(proc, [v, acc], ctx)
    return acc


def foldr(ctx: Context, values: list[LispValue]) -> LispValue:
    """(foldr f init lst): (f elem acc) from the right."""
    proc = _ensure_procedure(values[0])
    acc = values[1]
    for v in reversed(ensure_list(values[2])):
        acc = call_procedure(proc, [v, acc], ctx)
    return acc


PROCEDURES = [
    ctx_proc("apply", apply_proc, Arity.at_least(2)),
    ctx_proc("map", map_proc, Arity.at_least(2)),
    ctx_proc("filter", filter_proc, Arity.exact(2)),
    ctx_proc("foldl", foldl, Arity.exact(3)),
    ctx_proc("foldr", foldr, Arity.exact(3)),
]
