"""
  Scheme Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Parsley expressions:

    - lists -> Pair chains ending in Null
    - dotted lists -> Pair chains ending in the cdr expression
    - vectors -> Vector
    - symbols -> Symbol
    - strings -> str
    - numbers -> float
    - booleans -> bool (#t / #f)
    - characters -> Char
    - quote forms -> (quote expr)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from parsley import SExpression
from parsley.errors import ParsleySyntaxError
from parsley.types.char import Char, NAMED_CHARS
from parsley.types.sexp import Null, Pair, Vector
from parsley.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<ml_start>#\|)"  # multi-line comment start
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<char>#\\(?:[a-zA-Z]{2,}|.))"  # character literals, named or single-char
    r"|(?P<vector>#\()"  # vector reader macro
    r'|(?P<symbol>[^\s()\'";]+)'  # fallback: symbols, numbers, booleans
    r")",
    re.DOTALL,
)

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
}

BOOLEANS: dict[str, bool] = {
    "#t": True,
    "#true": True,
    "#f": False,
    "#false": False,
}

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

SPECIAL_NUMBERS: dict[str, float] = {
    "+inf.0": float("inf"),
    "-inf.0": float("-inf"),
    "+nan.0": float("nan"),
    "-nan.0": float("nan"),
}

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise ParsleySyntaxError(source[pos:])
        if m.group("comment"):
            pos = m.end()
            continue
        if m.group("ml_start"):
            pos = m.end()
            depth = 1
            while depth > 0:
                if pos >= n:
                    raise ParsleySyntaxError("unterminated #| comment")
                if source.startswith("#|", pos):
                    depth += 1
                    pos += 2
                elif source.startswith("|#", pos):
                    depth -= 1
                    pos += 2
                else:
                    pos += 1
            continue
        for nm in TOKEN_RE.groupindex:
            if m.group(nm):
                yield nm, m.group(nm)
                pos = m.end()
                break


def parse_string_literal(token: str) -> str:
    out: list[str] = []
    body = token[1:-1]
    i = 0
    while i < len(body):
        c = body[i]
        if c == "\\" and i + 1 < len(body):
            nxt = body[i + 1]
            if nxt not in STRING_ESCAPES:
                raise ParsleySyntaxError(token)
            out.append(STRING_ESCAPES[nxt])
            i += 2
            continue
        out.append(c)
        i += 1
    return "".join(out)


def parse_atom(token: str) -> SExpression:
    """Turn a bare token into a boolean, number or symbol."""
    if token in BOOLEANS:
        return BOOLEANS[token]
    if token in SPECIAL_NUMBERS:
        return SPECIAL_NUMBERS[token]
    if NUMBER_RE.fullmatch(token):
        return float(token)
    if token.startswith("#"):
        raise ParsleySyntaxError(token)
    return Symbol(token)


def _build_list(items: list[SExpression], tail: SExpression = Null) -> SExpression:
    result = tail
    for item in reversed(items):
        result = Pair(item, result)
    return result


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise ParsleySyntaxError("unexpected end of input")

        if tok_type == "symbol":
            return parse_atom(tok_val)

        if tok_type == "quote":
            if self.peek()[0] is None:
                raise ParsleySyntaxError("'")
            return Pair(QUOTE, Pair(self.parse_expr(), Null))

        if tok_type == "string":
            return parse_string_literal(tok_val)

        if tok_type == "char":
            val = tok_val[2:]  # strip off "#\"
            if len(val) == 1:
                return Char(val)
            if val.lower() not in NAMED_CHARS:
                raise ParsleySyntaxError(tok_val)
            return Char(NAMED_CHARS[val.lower()])

        # List or dotted list
        if tok_type == "lparen":
            items: list[SExpression] = []
            while True:
                nxt_type, nxt_val = self.peek()
                if nxt_type is None:
                    raise ParsleySyntaxError("unmatched '('")
                if nxt_type == "rparen":
                    self.advance()
                    return _build_list(items)
                if nxt_type == "symbol" and nxt_val == ".":
                    self.advance()
                    if not items:
                        raise ParsleySyntaxError("'.' with no preceding element")
                    cdr_expr = self.parse_expr()
                    if self.peek()[0] != "rparen":
                        raise ParsleySyntaxError("expected ')' after dotted cdr")
                    self.advance()
                    return _build_list(items, cdr_expr)
                items.append(self.parse_expr())

        if tok_type == "vector":
            vec: list[SExpression] = []
            while True:
                nxt_type, _ = self.peek()
                if nxt_type is None:
                    raise ParsleySyntaxError("unmatched '#('")
                if nxt_type == "rparen":
                    self.advance()
                    return Vector(vec)
                vec.append(self.parse_expr())

        if tok_type == "rparen":
            raise ParsleySyntaxError("unexpected ')'")

        raise ParsleySyntaxError(tok_val or "")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> Iterator[SExpression]:
    """Lazily parse every top-level expression in `source`."""
    return TokenStream(lex(source)).parse_all()


def read(source: str) -> SExpression:
    """Parse exactly one expression from `source`."""
    exprs = list(parse(source))
    if len(exprs) != 1:
        raise ParsleySyntaxError(source)
    return exprs[0]
