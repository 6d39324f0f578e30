"""Runtime environment for Parsley.

An Environment is a single scope: a flat mapping from names to values with
unique keys. Nesting is handled by the Context, which keeps a stack of these.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Mapping, Optional

from parsley import SExpression


class Environment:
    """Mapping from names to Lisp values."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Optional[Mapping[str, SExpression]] = None):
        self.vars: dict[str, SExpression] = dict(bindings) if bindings else {}

    def get(self, name: str) -> Optional[SExpression]:
        """Return the value bound to `name`, or None if there is none."""
        return self.vars.get(name)

    def insert(self, name: str, value: SExpression) -> None:
        """Bind `name` to `value`, replacing any previous binding."""
        self.vars[name] = value

    def contains(self, name: str) -> bool:
        return name in self.vars

    def update(self, mapping: Mapping[str, SExpression]) -> None:
        """Bulk-insert a mapping of name -> value."""
        for k, v in mapping.items():
            self.insert(k, v)

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Environment) and self.vars.keys() == other.vars.keys() and all(
            _values_equal(v, other.vars[k]) for k, v in self.vars.items()
        )

    __hash__ = None  # type: ignore[assignment]

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment ")
            self._write_vars(buffer)
            buffer.write(">")
            return buffer.getvalue()


def _values_equal(a: SExpression, b: SExpression) -> bool:
    from parsley.types.sexp import equal
    return equal(a, b)
