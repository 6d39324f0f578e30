"""Procedure values and arity contracts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

from parsley import SExpression
from parsley.errors import ArityError
from parsley.types.environment import Environment

if TYPE_CHECKING:
    from parsley.context import Context

PureFn = Callable[[SExpression], SExpression]
CtxFn = Callable[["Context", SExpression], SExpression]


class ProcKind(Enum):
    # receives the evaluated argument list
    PURE = "pure"
    # receives the unevaluated argument list and the Context
    CTX = "ctx"


@dataclass(frozen=True)
class Arity:
    """Accepted argument counts: `low` up to `high` inclusive (None = unbounded)."""

    low: int
    high: Optional[int]

    @classmethod
    def exact(cls, n: int) -> Arity:
        return cls(n, n)

    @classmethod
    def at_least(cls, n: int) -> Arity:
        return cls(n, None)

    @classmethod
    def between(cls, low: int, high: int) -> Arity:
        return cls(low, high)

    def accepts(self, count: int) -> bool:
        if count < self.low:
            return False
        return self.high is None or count <= self.high

    def __str__(self) -> str:
        if self.high is None:
            return f"at least {self.low}"
        if self.high == self.low:
            return f"exactly {self.low}"
        return f"between {self.low} and {self.high}"


class Procedure:
    """A callable Lisp value.

    `kind` selects the calling convention used by the evaluator; `env` is the
    closure environment captured when the procedure was created (None for
    library procedures, which see the caller's scope).
    """

    __slots__ = ("func", "kind", "arity", "name", "env")

    def __init__(
        self,
        func: PureFn | CtxFn,
        kind: ProcKind,
        arity: Arity,
        name: Optional[str] = None,
        env: Optional[Environment] = None,
    ):
        self.func = func
        self.kind: ProcKind = kind
        self.arity: Arity = arity
        self.name: Optional[str] = name
        self.env: Optional[Environment] = env

    @classmethod
    def pure(cls, func: PureFn, arity: Arity, name: Optional[str] = None) -> Procedure:
        return cls(func, ProcKind.PURE, arity, name)

    @classmethod
    def ctx(
        cls,
        func: CtxFn,
        arity: Arity,
        name: Optional[str] = None,
        env: Optional[Environment] = None,
    ) -> Procedure:
        return cls(func, ProcKind.CTX, arity, name, env)

    def check_arity(self, count: int) -> None:
        """Raise ArityError unless `count` arguments satisfy this procedure's arity."""
        if not self.arity.accepts(count):
            raise ArityError(self.arity, count)

    def __str__(self) -> str:
        if self.name:
            return f"#<procedure {self.name}>"
        return "#<procedure>"

    def __repr__(self) -> str:
        return f"<Procedure {self.name or 'anonymous'} {self.kind.value} arity={self.arity}>"
