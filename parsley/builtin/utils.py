"""Helpers for building library procedures.

Library procedures are mostly PURE: they receive the evaluated argument list
(a Pair chain or Null). Procedures that need the Context (output, calling
other procedures) are CTX procedures that evaluate their own arguments.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Callable

from parsley import LispValue, SExpression
from parsley.errors import ParsleyTypeError
from parsley.printer import write_string
from parsley.types.procedure import Arity, Procedure
from parsley.types.sexp import is_number

if TYPE_CHECKING:
    from parsley.context import Context


def ensure_number(value: LispValue) -> float:
    if not is_number(value):
        raise ParsleyTypeError("number", write_string(value))
    return float(value)


def ensure_integer(value: LispValue) -> int:
    n = ensure_number(value)
    if not n.is_integer():
        raise ParsleyTypeError("integer", write_string(value))
    return int(n)


def ensure_type(value: LispValue, kind: type | tuple[type, ...], name: str) -> Any:
    if not isinstance(value, kind):
        raise ParsleyTypeError(name, write_string(value))
    return value


def float_op(fn: Callable[..., float]) -> Callable[..., float]:
    """Wrap a float function so domain errors give IEEE results instead of raising."""
    def wrapped(*args: float) -> float:
        try:
            return float(fn(*args))
        except (ZeroDivisionError, ValueError):
            return math.nan
        except OverflowError:
            return math.inf
    return wrapped


def make_unary_numeric(fn: Callable[[float], float]) -> Callable[[SExpression], LispValue]:
    op = float_op(fn)

    def proc(args: SExpression) -> LispValue:
        return op(ensure_number(args.head))
    return proc


def make_binary_numeric(fn: Callable[[float, float], float]) -> Callable[[SExpression], LispValue]:
    op = float_op(fn)

    def proc(args: SExpression) -> LispValue:
        x, y = args
        return op(ensure_number(x), ensure_number(y))
    return proc


def make_fold(fn: Callable[[float, float], float], initial: float) -> Callable[[SExpression], LispValue]:
    """Left fold over any number of numeric arguments, starting at `initial`."""
    op = float_op(fn)

    def proc(args: SExpression) -> LispValue:
        acc = initial
        for arg in args:
            acc = op(acc, ensure_number(arg))
        return acc
    return proc


def make_comparison(fn: Callable[[float, float], bool]) -> Callable[[SExpression], LispValue]:
    """Chained numeric comparison: (< a b c) is (and (< a b) (< b c))."""
    def proc(args: SExpression) -> LispValue:
        nums = [ensure_number(a) for a in args]
        return all(fn(a, b) for a, b in zip(nums, nums[1:]))
    return proc


def make_type_check(pred: Callable[[LispValue], bool]) -> Callable[[SExpression], LispValue]:
    def proc(args: SExpression) -> LispValue:
        return bool(pred(args.head))
    return proc


def make_eager_ctx(fn: Callable[[Context, list[LispValue]], LispValue]) -> Callable[[Context, SExpression], LispValue]:
    """Turn fn(ctx, values) into a CTX procedure body that evaluates its arguments first."""
    def proc(ctx: Context, args: SExpression) -> LispValue:
        return fn(ctx, [ctx.eval(a) for a in args])
    return proc


def pure(name: str, func: Callable[[SExpression], LispValue], arity: Arity) -> Procedure:
    return Procedure.pure(func, arity, name=name)


def ctx_proc(name: str, func: Callable[[Context, list[LispValue]], LispValue], arity: Arity) -> Procedure:
    return Procedure.ctx(make_eager_ctx(func), arity, name=name)
