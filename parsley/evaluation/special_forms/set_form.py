from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.errors import ParsleyTypeError
from parsley.types.symbol import Symbol

if TYPE_CHECKING:
    from parsley.context import Context


def set_form(ctx: Context, tail: SExpression) -> LispValue:
    """(set! name expr)

    Re-binds an existing user definition. Fails with UndefinedSymbolError when
    no user scope binds `name`; core and library bindings are never touched.
    """
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise ParsleyTypeError("symbol", str(var_sym))
    value = ctx.eval(val_expr)
    return ctx.set(var_sym.id, value)
