from parsley.types.symbol import Symbol
from parsley.types.char import Char
from parsley.types.undefined import Undefined, UndefinedType
from parsley.types.sexp import (
    Null,
    NullType,
    Pair,
    Vector,
    cons,
    equal,
    from_iterable,
    from_python,
    is_list,
    is_number,
    sexp,
    to_list,
)
from parsley.types.environment import Environment
from parsley.types.cont import Cont
from parsley.types.procedure import Arity, ProcKind, Procedure

__all__ = [
    "Arity",
    "Char",
    "Cont",
    "Environment",
    "Null",
    "NullType",
    "Pair",
    "ProcKind",
    "Procedure",
    "Symbol",
    "Undefined",
    "UndefinedType",
    "Vector",
    "cons",
    "equal",
    "from_iterable",
    "from_python",
    "is_list",
    "is_number",
    "sexp",
    "to_list",
]
