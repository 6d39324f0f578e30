"""Output procedures. Text goes to the Context's output (see Context.capture)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from parsley import LispValue
from parsley.builtin.utils import ctx_proc
from parsley.printer import display_string, write_string
from parsley.types.procedure import Arity
from parsley.types.undefined import Undefined

if TYPE_CHECKING:
    from parsley.context import Context


def display(ctx: Context, values: list[LispValue]) -> LispValue:
    ctx.write(display_string(values[0]))
    return Undefined


def write(ctx: Context, values: list[LispValue]) -> LispValue:
    ctx.write(write_string(values[0]))
    return Undefined


def newline(ctx: Context, values: list[LispValue]) -> LispValue:
    ctx.write("\n")
    return Undefined


PROCEDURES = [
    ctx_proc("display", display, Arity.exact(1)),
    ctx_proc("write", write, Arity.exact(1)),
    ctx_proc("newline", newline, Arity.exact(0)),
]
