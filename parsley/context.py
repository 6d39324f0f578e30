"""Evaluation context for Parsley expressions.

A Context keeps separate environments for "core" (the special forms), "lang"
(library procedures) and "user" definitions, plus the continuation chain that
carries closure scopes through nested calls. Most methods operate on the user
environment; core is read-only once the Context has been built.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from io import StringIO
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from parsley import LispValue, SExpression
from parsley.config import get_recursion_limit
from parsley.errors import UndefinedSymbolError
from parsley.evaluation.evaluator import apply, evaluate
from parsley.evaluation.special_forms import core_bindings
from parsley.reader.parser import parse
from parsley.types.cont import Cont
from parsley.types.environment import Environment
from parsley.types.undefined import Undefined

logger = logging.getLogger(__name__)


class Context:
    """Evaluation state for one session.

    `Context()` only provides the special forms. Use `Context.base()` for a
    context with the standard procedure library installed in `lang`.
    """

    def __init__(self):
        self._core: Mapping[str, LispValue] = MappingProxyType(core_bindings())
        # Additional definitions inserted here are visible everywhere and can
        # be overridden by user definitions (see `get`).
        self.lang: Environment = Environment()
        self.user: list[Environment] = [Environment()]
        self.cont: Cont = Cont()
        self.output: Optional[StringIO] = None

        limit = get_recursion_limit()
        if limit is not None and limit > sys.getrecursionlimit():
            sys.setrecursionlimit(limit)
            logger.debug("Raised recursion limit to %d", limit)

    @classmethod
    def base(cls, prelude: bool = False) -> Context:
        """A context with the standard library, and optionally the prelude files."""
        from parsley.builtin import register
        from parsley.modules.prelude_loader import load_prelude

        ctx = cls()
        register(ctx.lang)
        logger.debug("Registered %d library procedures", len(ctx.lang))
        if prelude:
            load_prelude(ctx)
        return ctx

    @property
    def core(self) -> Mapping[str, LispValue]:
        return self._core

    # --- User scopes ---

    def push(self) -> None:
        """Add a new, nested scope."""
        self.user.append(Environment())

    def pop(self) -> None:
        """Remove the most recently added scope.

        If only the global scope is left, all definitions are cleared and the
        global scope is replaced with an empty one.
        """
        self.user.pop()
        if not self.user:
            self.push()

    def define(self, name: str, value: LispValue) -> None:
        """Create a definition in the current (innermost) scope."""
        self.user[-1].insert(name, value)

    def resolve_frame(self, name: str) -> Optional[int]:
        """Index of the innermost user scope binding `name` (0 is global)."""
        for index in range(len(self.user) - 1, -1, -1):
            if name in self.user[index]:
                return index
        return None

    def _get_user(self, name: str) -> Optional[LispValue]:
        index = self.resolve_frame(name)
        return None if index is None else self.user[index].get(name)

    def get(self, name: str) -> Optional[LispValue]:
        """Get the definition for `name`, or None if there is none.

        Resolution order:
        1) core (special forms, cannot be overridden)
        2) the closure scope of the current continuation node
        3) user definitions, innermost scope first
        4) lang (library definitions, which users may override)
        """
        if name in self._core:
            return self._core[name]

        value = self.cont.env.get(name)
        if value is not None:
            return value

        value = self._get_user(name)
        if value is not None:
            return value

        return self.lang.get(name)

    def set(self, name: str, value: LispValue) -> LispValue:
        """Re-bind an existing user definition.

        Returns Undefined on success; raises UndefinedSymbolError when no user
        scope binds `name`. Nothing else is created or mutated.
        """
        index = self.resolve_frame(name)
        if index is None:
            raise UndefinedSymbolError(name)
        self.user[index].insert(name, value)
        return Undefined

    def close(self, names: Iterable[str]) -> Environment:
        """Snapshot the user bindings of exactly `names` into a new Environment."""
        out = Environment()
        for name in names:
            value = self._get_user(name)
            if value is not None:
                out.insert(name, value)
        return out

    # --- Continuation chain ---

    def push_cont(self, env: Optional[Environment]) -> None:
        """Enter a closure scope; without an environment this is a no-op."""
        if env is not None:
            self.cont = Cont(self.cont, env)

    def pop_cont(self) -> None:
        """Return to the parent closure scope (or a fresh root)."""
        parent = self.cont.parent
        self.cont = parent if parent is not None else Cont()

    @contextmanager
    def closure_scope(self, env: Optional[Environment]) -> Iterator[None]:
        """Run the enclosed block inside `env`'s closure scope, if there is one."""
        if env is None:
            yield
            return
        self.push_cont(env)
        try:
            yield
        finally:
            self.pop_cont()

    @contextmanager
    def caller_scope(self) -> Iterator[None]:
        """Temporarily see what the caller of the current closure sees."""
        current = self.cont
        self.cont = current.parent if current.parent is not None else Cont()
        try:
            yield
        finally:
            self.cont = current

    @contextmanager
    def procedure_frame(self) -> Iterator[Environment]:
        """Run a compound procedure body in a fresh frame over the global scope.

        The caller's local frames are hidden for the duration, so the body only
        sees its own frame, its closure scope, globals and lang.
        """
        saved = self.user
        frame = Environment()
        self.user = [saved[0], frame]
        try:
            yield frame
        finally:
            self.user = saved

    # --- Evaluation ---

    def eval(self, expr: SExpression) -> LispValue:
        """Evaluate an expression; definitions made by it persist in this context."""
        return evaluate(expr, self)

    def apply(self, expr: SExpression) -> LispValue:
        return apply(expr, self)

    def run(self, code: str) -> LispValue:
        """Parse and evaluate every expression in `code`, returning the last value."""
        result: LispValue = Undefined
        for expr in parse(code):
            result = self.eval(expr)
        return result

    def load(self, path: str | Path) -> LispValue:
        """Run a source file in this context."""
        path = Path(path)
        logger.debug("Loading %s", path)
        return self.run(path.read_text(encoding="utf-8"))

    # --- Output ---

    def write(self, text: str) -> None:
        """Send text produced by display/write/newline to the current output."""
        if self.output is not None:
            self.output.write(text)
        else:
            sys.stdout.write(text)

    @contextmanager
    def capture(self) -> Iterator[StringIO]:
        """Collect printed output in a buffer instead of writing to stdout."""
        previous = self.output
        self.output = StringIO()
        try:
            yield self.output
        finally:
            self.output = previous
