"""String and symbol conversion procedures."""

from __future__ import annotations

from parsley import LispValue, SExpression
from parsley.builtin.pairs import build_list
from parsley.builtin.utils import ensure_number, ensure_type, pure
from parsley.printer import format_number
from parsley.types.char import Char
from parsley.types.procedure import Arity
from parsley.types.symbol import Symbol


def string_append(args: SExpression) -> LispValue:
    return "".join(ensure_type(a, str, "string") for a in args)


PROCEDURES = [
    pure("string-length", lambda args: float(len(ensure_type(args.head, str, "string"))), Arity.exact(1)),
    pure("string-append", string_append, Arity.at_least(0)),
    pure("string->symbol", lambda args: Symbol(ensure_type(args.head, str, "string")), Arity.exact(1)),
    pure("symbol->string", lambda args: ensure_type(args.head, Symbol, "symbol").id, Arity.exact(1)),
    pure("number->string", lambda args: format_number(ensure_number(args.head)), Arity.exact(1)),
    pure("string->list", lambda args: build_list([Char(c) for c in ensure_type(args.head, str, "string")]), Arity.exact(1)),
]
