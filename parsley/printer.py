"""External representation of Parsley values.

`write_string` renders values the way the reader would read them back
(strings quoted, characters as #\\x); `display_string` is the human-facing
form used by `display`.
"""

from __future__ import annotations

import math
from io import StringIO

from parsley import LispValue
from parsley.types.char import Char
from parsley.types.sexp import Null, Pair, Vector, is_number

_STRING_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\t": "\\t", "\r": "\\r"}


def format_number(n: float) -> str:
    if math.isnan(n):
        return "+nan.0"
    if math.isinf(n):
        return "+inf.0" if n > 0 else "-inf.0"
    n = float(n)
    if n.is_integer() and abs(n) < 1e16 and not (n == 0 and math.copysign(1.0, n) < 0):
        return str(int(n))
    return repr(n)


def _write(value: LispValue, buffer: StringIO, display: bool) -> None:
    if value is Null:
        buffer.write("()")
    elif isinstance(value, Pair):
        buffer.write("(")
        _write(value.head, buffer, display)
        node = value.tail
        while isinstance(node, Pair):
            buffer.write(" ")
            _write(node.head, buffer, display)
            node = node.tail
        if node is not Null:
            buffer.write(" . ")
            _write(node, buffer, display)
        buffer.write(")")
    elif isinstance(value, Vector):
        buffer.write("#(")
        for i, item in enumerate(value):
            if i:
                buffer.write(" ")
            _write(item, buffer, display)
        buffer.write(")")
    elif isinstance(value, bool):
        buffer.write("#t" if value else "#f")
    elif is_number(value):
        buffer.write(format_number(value))
    elif isinstance(value, str):
        if display:
            buffer.write(value)
        else:
            buffer.write('"')
            buffer.write("".join(_STRING_ESCAPES.get(c, c) for c in value))
            buffer.write('"')
    elif isinstance(value, Char):
        buffer.write(value.value if display else str(value))
    else:
        buffer.write(str(value))


def write_string(value: LispValue) -> str:
    with StringIO() as buffer:
        _write(value, buffer, display=False)
        return buffer.getvalue()


def display_string(value: LispValue) -> str:
    with StringIO() as buffer:
        _write(value, buffer, display=True)
        return buffer.getvalue()
