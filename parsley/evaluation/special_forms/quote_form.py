from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import SExpression, LispValue

if TYPE_CHECKING:
    from parsley.context import Context


def quote_form(ctx: Context, tail: SExpression) -> LispValue:
    """(quote datum) -> datum, unevaluated."""
    return tail.head
