from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.errors import ParsleyTypeError
from parsley.evaluation.special_forms.lambda_form import make_lambda
from parsley.types.procedure import Procedure
from parsley.types.sexp import Pair
from parsley.types.symbol import Symbol
from parsley.types.undefined import Undefined

if TYPE_CHECKING:
    from parsley.context import Context


def define_form(ctx: Context, tail: SExpression) -> LispValue:
    """
    (define name value)
    (define (name params...) body...)

    Binds in the innermost user scope and returns Undefined.
    """
    target, rest = tail.head, tail.tail

    if isinstance(target, Pair):
        # Function shorthand: (define (f . params) body...)
        name = target.head
        if not isinstance(name, Symbol):
            raise ParsleyTypeError("symbol", str(name))
        value = make_lambda(ctx, target.tail, rest, name=name.id)
        if len(ctx.user) > 1:
            # Local procedures carry their own binding so recursive calls resolve
            value.env.insert(name.id, value)
    elif isinstance(target, Symbol):
        name = target
        value = ctx.eval(rest.head)
        if isinstance(value, Procedure) and value.name is None:
            value.name = name.id
    else:
        raise ParsleyTypeError("symbol", str(target))

    ctx.define(name.id, value)
    return Undefined
