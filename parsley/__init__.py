# Core type aliases for Parsley's data model.
# Code and data share one representation: Null, Pair and Vector from
# parsley.types.sexp, with plain Python values (bool, float, str) plus Char,
# Symbol, Procedure and Undefined as atoms.
#
# Naming guidance:
# - SExpression: Use in reader and special-form code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any

LispValue = Any
SExpression = LispValue

from parsley.context import Context  # noqa: E402
from parsley.errors import ParsleyError  # noqa: E402


def run(code: str) -> LispValue:
    """Run a code snippet in a fresh base context."""
    return Context.base().run(code)


__all__ = ["Context", "LispValue", "ParsleyError", "SExpression", "run"]
