from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.types.undefined import Undefined

if TYPE_CHECKING:
    from parsley.context import Context


def eval_sequence(ctx: Context, body: SExpression) -> LispValue:
    """Evaluate each expression of `body` in order and return the last value."""
    result: LispValue = Undefined
    for e in body:
        result = ctx.eval(e)
    return result


def begin_form(ctx: Context, tail: SExpression) -> LispValue:
    """(begin expr...) -> value of the last expr; (begin) -> Undefined."""
    return eval_sequence(ctx, tail)
