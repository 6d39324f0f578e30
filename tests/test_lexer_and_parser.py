import math

import pytest
from hypothesis import given, strategies as st

from parsley.errors import ParsleySyntaxError
from parsley.printer import write_string
from parsley.reader import lex, parse, read
from parsley.types import Char, Null, Pair, Symbol, Vector, sexp


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(a 'b)", [("lparen", "("), ("symbol", "a"), ("quote", "'"), ("symbol", "b"), ("rparen", ")")]),
        ('"a \\" b"', [("string", '"a \\" b"')]),
        ("#\\a #\\space", [("char", "#\\a"), ("char", "#\\space")]),
        ("#(1)", [("vector", "#("), ("symbol", "1"), ("rparen", ")")]),
        ("x ; trailing comment\ny", [("symbol", "x"), ("symbol", "y")]),
        ("x #| block #| nested |# |# y", [("symbol", "x"), ("symbol", "y")]),
        ("   \n\t ", []),
    ],
)
def test_lex(source, expected):
    assert list(lex(source)) == expected


def test_unterminated_block_comment():
    with pytest.raises(ParsleySyntaxError):
        list(lex("#| never closed"))


@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", 42.0),
        ("-3.5", -3.5),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("+inf.0", math.inf),
        ("#t", True),
        ("#false", False),
        ('"line\\nbreak"', "line\nbreak"),
        ("#\\newline", Char("\n")),
        ("#\\(", Char("(")),
        ("foo", Symbol("foo")),
        ("inf", Symbol("inf")),
        ("-", Symbol("-")),
        ("set!", Symbol("set!")),
        ("()", Null),
        ("(1 (2) 3)", sexp(1, sexp(2), 3)),
        ("(1 . 2)", Pair(1.0, 2.0)),
        ("(1 2 . 3)", Pair(1.0, Pair(2.0, 3.0))),
        ("'x", sexp(Symbol("quote"), Symbol("x"))),
        ("'(1 2)", sexp(Symbol("quote"), sexp(1, 2))),
        ("#(1 a)", Vector([1.0, Symbol("a")])),
    ],
)
def test_read(source, expected):
    assert read(source) == expected


def test_parse_is_lazy_and_ordered():
    exprs = parse("1 (a) ) never reached")
    assert next(exprs) == 1
    assert next(exprs) == sexp(Symbol("a"))
    with pytest.raises(ParsleySyntaxError):
        next(exprs)


@pytest.mark.parametrize(
    "source",
    ["(1 2", ")", "'", "(. 1)", "(1 . 2 3)", "#(1", "#\\nonsense", "#q", '"bad \\q"', "1 2"],
)
def test_syntax_errors(source):
    with pytest.raises(ParsleySyntaxError):
        read(source)


@given(st.recursive(
    st.one_of(
        st.integers(-1000, 1000).map(float),
        st.booleans(),
        st.text(alphabet="abcxyz-+!?<>=*/", min_size=1).map(Symbol),
        st.text(alphabet=st.characters(blacklist_categories=("Cs",))),
    ),
    lambda children: st.lists(children).map(lambda items: sexp(*items)),
    max_leaves=20,
))
def test_written_data_reads_back(value):
    assert read(write_string(value)) == value
