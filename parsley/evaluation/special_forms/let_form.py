from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.errors import ParsleySyntaxError
from parsley.types.sexp import Null, Pair
from parsley.types.symbol import Symbol

if TYPE_CHECKING:
    from parsley.context import Context

LAMBDA = Symbol("lambda")


def let_form(ctx: Context, tail: SExpression) -> LispValue:
    """(let ((name expr)...) body...)

    Rewritten to ((lambda (name...) body...) expr...) and evaluated.
    """
    bindings, body = tail.head, tail.tail
    names: list[SExpression] = []
    inits: list[SExpression] = []
    if not (bindings is Null or isinstance(bindings, Pair)):
        raise ParsleySyntaxError(str(bindings))
    for binding in bindings:
        if not (isinstance(binding, Pair) and isinstance(binding.head, Symbol)) or len(binding) != 2:
            raise ParsleySyntaxError(str(binding))
        names.append(binding.head)
        inits.append(binding.tail.head)

    params: SExpression = Null
    for name in reversed(names):
        params = Pair(name, params)
    args: SExpression = Null
    for init in reversed(inits):
        args = Pair(init, args)
    return ctx.eval(Pair(Pair(LAMBDA, Pair(params, body)), args))
