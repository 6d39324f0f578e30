"""Numeric procedures. All numbers are floats; results follow IEEE semantics."""

from __future__ import annotations

import math
import operator

from parsley import LispValue, SExpression
from parsley.builtin.utils import (
    ensure_integer,
    ensure_number,
    make_binary_numeric,
    make_comparison,
    make_fold,
    make_type_check,
    make_unary_numeric,
    pure,
)
from parsley.types.procedure import Arity
from parsley.types.sexp import Null, is_number


def divide(x: float, y: float) -> float:
    if y == 0:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y


def sub(args: SExpression) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    first = ensure_number(args.head)
    if args.tail is Null:
        return -first
    for arg in args.tail:
        first -= ensure_number(arg)
    return first


def div(args: SExpression) -> LispValue:
    """Divide the first number by the rest; reciprocal for one arg."""
    first = ensure_number(args.head)
    if args.tail is Null:
        return divide(1.0, first)
    for arg in args.tail:
        first = divide(first, ensure_number(arg))
    return first


def remainder(x: float, y: float) -> float:
    # sign follows the dividend
    return math.fmod(x, y)


def modulo(x: float, y: float) -> float:
    # sign follows the divisor
    if y == 0:
        return math.nan
    return x - y * math.floor(x / y)


def quotient(x: float, y: float) -> float:
    if y == 0:
        return divide(x, y)
    return float(math.trunc(x / y))


def minimum(args: SExpression) -> LispValue:
    return min(ensure_number(a) for a in args)


def maximum(args: SExpression) -> LispValue:
    return max(ensure_number(a) for a in args)


def gcd(args: SExpression) -> LispValue:
    result = 0
    for arg in args:
        result = math.gcd(result, ensure_integer(arg))
    return float(result)


def lcm(args: SExpression) -> LispValue:
    result = 1
    for arg in args:
        n = abs(ensure_integer(arg))
        if n == 0:
            return 0.0
        result = result * n // math.gcd(result, n)
    return float(result)


def _round(x: float) -> float:
    # round() is round-half-to-even, as Scheme requires
    return float(round(x)) if math.isfinite(x) else x


def _is_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer()


def odd(args: SExpression) -> LispValue:
    return ensure_integer(args.head) % 2 == 1


def even(args: SExpression) -> LispValue:
    return ensure_integer(args.head) % 2 == 0


PROCEDURES = [
    pure("+", make_fold(operator.add, 0.0), Arity.at_least(0)),
    pure("*", make_fold(operator.mul, 1.0), Arity.at_least(0)),
    pure("-", sub, Arity.at_least(1)),
    pure("/", div, Arity.at_least(1)),
    pure("remainder", make_binary_numeric(remainder), Arity.exact(2)),
    pure("modulo", make_binary_numeric(modulo), Arity.exact(2)),
    pure("quotient", make_binary_numeric(quotient), Arity.exact(2)),
    pure("abs", make_unary_numeric(abs), Arity.exact(1)),
    pure("min", minimum, Arity.at_least(1)),
    pure("max", maximum, Arity.at_least(1)),
    pure("gcd", gcd, Arity.at_least(0)),
    pure("lcm", lcm, Arity.at_least(0)),
    pure("expt", make_binary_numeric(math.pow), Arity.exact(2)),
    pure("sqrt", make_unary_numeric(math.sqrt), Arity.exact(1)),
    pure("exp", make_unary_numeric(math.exp), Arity.exact(1)),
    pure("log", make_unary_numeric(lambda x: -math.inf if x == 0 else math.log(x)), Arity.exact(1)),
    pure("floor", make_unary_numeric(lambda x: float(math.floor(x)) if math.isfinite(x) else x), Arity.exact(1)),
    pure("ceiling", make_unary_numeric(lambda x: float(math.ceil(x)) if math.isfinite(x) else x), Arity.exact(1)),
    pure("round", make_unary_numeric(_round), Arity.exact(1)),
    pure("truncate", make_unary_numeric(lambda x: float(math.trunc(x)) if math.isfinite(x) else x), Arity.exact(1)),
    pure("number?", make_type_check(is_number), Arity.exact(1)),
    pure("integer?", make_type_check(lambda v: is_number(v) and _is_integer(float(v))), Arity.exact(1)),
    pure("zero?", make_type_check(lambda v: ensure_number(v) == 0), Arity.exact(1)),
    pure("positive?", make_type_check(lambda v: ensure_number(v) > 0), Arity.exact(1)),
    pure("negative?", make_type_check(lambda v: ensure_number(v) < 0), Arity.exact(1)),
    pure("odd?", odd, Arity.exact(1)),
    pure("even?", even, Arity.exact(1)),
    pure("=", make_comparison(operator.eq), Arity.at_least(1)),
    pure("<", make_comparison(operator.lt), Arity.at_least(1)),
    pure(">", make_comparison(operator.gt), Arity.at_least(1)),
    pure("<=", make_comparison(operator.le), Arity.at_least(1)),
    pure(">=", make_comparison(operator.ge), Arity.at_least(1)),
]
