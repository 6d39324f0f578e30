"""Vector procedures."""

from __future__ import annotations

from parsley import LispValue, SExpression
from parsley.builtin.pairs import build_list, ensure_list
from parsley.builtin.utils import ensure_integer, ensure_type, pure
from parsley.errors import ParsleyIndexError
from parsley.types.procedure import Arity
from parsley.types.sexp import Null, Vector
from parsley.types.undefined import Undefined


def make_vector(args: SExpression) -> LispValue:
    size = ensure_integer(args.head)
    if size < 0:
        raise ParsleyIndexError(size, 0)
    fill = args.tail.head if args.tail is not Null else Undefined
    return Vector([fill] * size)


def vector_ref(args: SExpression) -> LispValue:
    vec, k = args
    vec = ensure_type(vec, Vector, "vector")
    index = ensure_integer(k)
    if not 0 <= index < len(vec):
        raise ParsleyIndexError(index, len(vec))
    return vec[index]


PROCEDURES = [
    pure("vector", lambda args: Vector(args), Arity.at_least(0)),
    pure("make-vector", make_vector, Arity.between(1, 2)),
    pure("vector-ref", vector_ref, Arity.exact(2)),
    pure("vector-length", lambda args: float(len(ensure_type(args.head, Vector, "vector"))), Arity.exact(1)),
    pure("vector->list", lambda args: build_list(list(ensure_type(args.head, Vector, "vector"))), Arity.exact(1)),
    pure("list->vector", lambda args: Vector(ensure_list(args.head)), Arity.exact(1)),
]
