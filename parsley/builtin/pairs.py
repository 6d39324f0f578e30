"""Pair and list procedures."""

from __future__ import annotations

from parsley import LispValue, SExpression
from parsley.builtin.utils import ensure_integer, ensure_type, pure
from parsley.errors import ParsleyIndexError, ParsleyTypeError
from parsley.printer import write_string
from parsley.types.procedure import Arity
from parsley.types.sexp import Null, Pair, is_list, to_list


def build_list(values: list[LispValue], tail: SExpression = Null) -> SExpression:
    result = tail
    for value in reversed(values):
        result = Pair(value, result)
    return result


def ensure_list(value: LispValue) -> list[LispValue]:
    if not is_list(value):
        raise ParsleyTypeError("list", write_string(value))
    return to_list(value)


def car(args: SExpression) -> LispValue:
    return ensure_type(args.head, Pair, "pair").head


def cdr(args: SExpression) -> LispValue:
    return ensure_type(args.head, Pair, "pair").tail


def cons(args: SExpression) -> LispValue:
    head, tail = args
    return Pair(head, tail)


def make_list(args: SExpression) -> LispValue:
    # The evaluated argument list is already a fresh proper list
    return args


def length(args: SExpression) -> LispValue:
    return float(len(ensure_list(args.head)))


def append(args: SExpression) -> LispValue:
    """(append l1 l2 ... last): copies every list but the last, which is shared."""
    lists = to_list(args)
    if not lists:
        return Null
    result = lists[-1]
    for lst in reversed(lists[:-1]):
        result = build_list(ensure_list(lst), result)
    return result


def reverse(args: SExpression) -> LispValue:
    result: SExpression = Null
    for value in ensure_list(args.head):
        result = Pair(value, result)
    return result


def list_tail(args: SExpression) -> LispValue:
    lst, k = args
    index = ensure_integer(k)
    node = lst
    for _ in range(index):
        if not isinstance(node, Pair):
            raise ParsleyIndexError(index, len(ensure_list(lst)))
        node = node.tail
    return node


def list_ref(args: SExpression) -> LispValue:
    lst, k = args
    items = ensure_list(lst)
    index = ensure_integer(k)
    if not 0 <= index < len(items):
        raise ParsleyIndexError(index, len(items))
    return items[index]


PROCEDURES = [
    pure("cons", cons, Arity.exact(2)),
    pure("car", car, Arity.exact(1)),
    pure("cdr", cdr, Arity.exact(1)),
    pure("list", make_list, Arity.at_least(0)),
    pure("length", length, Arity.exact(1)),
    pure("append", append, Arity.at_least(0)),
    pure("reverse", reverse, Arity.exact(1)),
    pure("list-tail", list_tail, Arity.exact(2)),
    pure("list-ref", list_ref, Arity.exact(2)),
]
