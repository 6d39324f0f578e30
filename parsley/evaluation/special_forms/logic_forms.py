from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.evaluation.special_forms.if_form import is_truthy

if TYPE_CHECKING:
    from parsley.context import Context


def and_form(ctx: Context, tail: SExpression) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until #f is found,
    which is returned immediately. If all operands are truthy, returns the
    value of the last operand. With zero operands, returns #t.
    """
    result: LispValue = True
    for expr in tail:
        result = ctx.eval(expr)
        if not is_truthy(result):
            return False
    return result


def or_form(ctx: Context, tail: SExpression) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    truthy value. If none are truthy, returns #f. With zero operands, returns #f.
    """
    for expr in tail:
        val = ctx.eval(expr)
        if is_truthy(val):
            return val
    return False
