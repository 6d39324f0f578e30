"""Type predicates and equivalence."""

from __future__ import annotations

from parsley import LispValue, SExpression
from parsley.builtin.utils import make_type_check, pure
from parsley.types.char import Char
from parsley.types.procedure import Arity, Procedure
from parsley.types.sexp import Null, Pair, Vector, equal, is_list
from parsley.types.symbol import Symbol


def is_eqv(a: LispValue, b: LispValue) -> bool:
    """Atoms compare by value; pairs, vectors and procedures by identity."""
    if isinstance(a, (Pair, Vector, Procedure)) or isinstance(b, (Pair, Vector, Procedure)):
        return a is b
    return equal(a, b)


def eqv(args: SExpression) -> LispValue:
    a, b = args
    return is_eqv(a, b)


def equal_p(args: SExpression) -> LispValue:
    a, b = args
    return equal(a, b)


def not_p(args: SExpression) -> LispValue:
    return args.head is False


PROCEDURES = [
    pure("null?", make_type_check(lambda v: v is Null), Arity.exact(1)),
    pure("pair?", make_type_check(lambda v: isinstance(v, Pair)), Arity.exact(1)),
    pure("list?", make_type_check(is_list), Arity.exact(1)),
    pure("string?", make_type_check(lambda v: isinstance(v, str)), Arity.exact(1)),
    pure("symbol?", make_type_check(lambda v: isinstance(v, Symbol)), Arity.exact(1)),
    pure("char?", make_type_check(lambda v: isinstance(v, Char)), Arity.exact(1)),
    pure("boolean?", make_type_check(lambda v: isinstance(v, bool)), Arity.exact(1)),
    pure("procedure?", make_type_check(lambda v: isinstance(v, Procedure)), Arity.exact(1)),
    pure("vector?", make_type_check(lambda v: isinstance(v, Vector)), Arity.exact(1)),
    pure("not", not_p, Arity.exact(1)),
    pure("eq?", eqv, Arity.exact(2)),
    pure("eqv?", eqv, Arity.exact(2)),
    pure("equal?", equal_p, Arity.exact(2)),
]
