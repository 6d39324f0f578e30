"""Symbolic expressions: the empty list, pairs and vectors.

Atoms are plain Python values (bool, float, str, Char, Symbol, Procedure and
the Undefined sentinel). Lists are chains of `Pair` cells ending in `Null`.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from parsley.errors import ParsleyTypeError


class NullType:
    """The empty list. Distinct from #f and from Undefined."""

    _instance: NullType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Null"
    def __str__(self): return "()"

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __len__(self) -> int:
        return 0

    def __eq__(self, other):
        return isinstance(other, NullType)

    def __hash__(self):
        return hash(NullType)


Null = NullType()


class Pair:
    """A cons cell owning its head and tail."""

    __slots__ = ("head", "tail")

    def __init__(self, head: Any, tail: Any = Null):
        self.head = head
        self.tail = tail

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the elements of a proper list.

        Raises ParsleyTypeError when the chain ends in something other than
        Null (a dotted pair).
        """
        node: Any = self
        while isinstance(node, Pair):
            yield node.head
            node = node.tail
        if node is not Null:
            raise ParsleyTypeError("list", str(self))

    def __len__(self) -> int:
        n = 0
        for _ in self:
            n += 1
        return n

    def __eq__(self, other: object) -> bool:
        return equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self):
        return f"Pair({self.head!r}, {self.tail!r})"

    def __str__(self):
        from parsley.printer import write_string
        return write_string(self)


class Vector:
    """An ordered, fixed-length sequence of expressions."""

    __slots__ = ("items",)

    def __init__(self, items: Iterable[Any] = ()):
        self.items: list[Any] = list(items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Any:
        return self.items[index]

    def __eq__(self, other: object) -> bool:
        return equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self):
        return f"Vector({self.items!r})"

    def __str__(self):
        from parsley.printer import write_string
        return write_string(self)


def cons(value: Any, lst: Any) -> Pair:
    """Prepend `value` to `lst`."""
    return Pair(value, lst)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def equal(a: Any, b: Any) -> bool:
    """Structural equality of two expressions.

    Atoms compare equal only within the same variant, so #t is never equal to
    1. Numbers follow float comparison (NaN is not equal to itself).
    Procedures compare by identity.
    """
    if a is Null or b is Null:
        return a is b
    if isinstance(a, Pair):
        if not isinstance(b, Pair):
            return False
        # Walk the spine iteratively; only heads recurse
        while isinstance(a, Pair) and isinstance(b, Pair):
            if not equal(a.head, b.head):
                return False
            a, b = a.tail, b.tail
        return equal(a, b)
    if isinstance(a, Vector):
        if not isinstance(b, Vector) or len(a) != len(b):
            return False
        return all(equal(x, y) for x, y in zip(a.items, b.items))
    if is_number(a):
        return is_number(b) and float(a) == float(b)
    if isinstance(a, bool):
        return isinstance(b, bool) and a == b
    if isinstance(a, str):
        return type(b) is str and a == b
    from parsley.types.procedure import Procedure
    if isinstance(a, Procedure):
        return a is b
    return type(a) is type(b) and a == b


def from_python(value: Any) -> Any:
    """Convert a Python value into an expression.

    ints become floats, lists become proper lists and tuples become vectors.
    Anything else is returned as-is.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return float(value)
    if isinstance(value, list):
        return from_iterable(value)
    if isinstance(value, tuple):
        return Vector(from_python(v) for v in value)
    return value


def from_iterable(values: Iterable[Any]) -> Any:
    """Build a proper list from an iterable of Python values."""
    result: Any = Null
    for v in reversed(list(values)):
        result = Pair(from_python(v), result)
    return result


def sexp(*values: Any) -> Any:
    """Shorthand for building a proper list: sexp(Symbol("+"), 1, 2)."""
    return from_iterable(values)


def to_list(lst: Any) -> list[Any]:
    """Return the elements of a proper list as a Python list."""
    if lst is Null:
        return []
    if not isinstance(lst, Pair):
        raise ParsleyTypeError("list", str(lst))
    return list(lst)


def is_list(value: Any) -> bool:
    """True for Null and for pair chains that end in Null."""
    while isinstance(value, Pair):
        value = value.tail
    return value is Null
