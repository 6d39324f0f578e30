from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue
from parsley.errors import ParsleySyntaxError
from parsley.evaluation.special_forms.begin_form import eval_sequence
from parsley.evaluation.special_forms.if_form import is_truthy
from parsley.types.sexp import Null, Pair
from parsley.types.symbol import Symbol
from parsley.types.undefined import Undefined

if TYPE_CHECKING:
    from parsley.context import Context

ELSE = Symbol("else")


def cond_form(ctx: Context, tail: SExpression) -> LispValue:
    """(cond (test expr...) ... (else expr...))

    Clauses are tried in order; only the body of the first clause whose test
    is truthy is evaluated. A clause without a body yields its test value.
    """
    for clause in tail:
        if not isinstance(clause, Pair):
            raise ParsleySyntaxError(str(clause))
        test, body = clause.head, clause.tail
        if test == ELSE:
            return eval_sequence(ctx, body)
        value = ctx.eval(test)
        if is_truthy(value):
            if body is Null:
                return value
            return eval_sequence(ctx, body)
    return Undefined
