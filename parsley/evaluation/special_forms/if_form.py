from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.types.sexp import Null
from parsley.types.undefined import Undefined

if TYPE_CHECKING:
    from parsley.context import Context


def is_truthy(value: LispValue) -> bool:
    # Scheme truthiness: everything except #f is true
    return value is not False


def if_form(ctx: Context, tail: SExpression) -> LispValue:
    """(if test then [else])

    Only the selected branch is evaluated. Without an else branch a false test
    yields Undefined.
    """
    test, rest = tail.head, tail.tail
    then_expr, rest = rest.head, rest.tail

    if is_truthy(ctx.eval(test)):
        return ctx.eval(then_expr)
    if rest is not Null:
        return ctx.eval(rest.head)
    return Undefined
