"""Standard procedure library for Parsley.

`register` installs every library procedure into an Environment, normally the
`lang` environment of a Context (see Context.base).
"""

from __future__ import annotations

from parsley.builtin import higher_order, numeric, output, pairs, predicates, strings, vectors
from parsley.types.environment import Environment
from parsley.types.procedure import Procedure
from parsley.types.sexp import Null

MODULES = (numeric, pairs, predicates, vectors, strings, output, higher_order)


def procedures() -> list[Procedure]:
    return [proc for module in MODULES for proc in module.PROCEDURES]


def register(env: Environment) -> None:
    """Insert the standard library into `env`."""
    env.insert("null", Null)
    env.update({proc.name: proc for proc in procedures()})
