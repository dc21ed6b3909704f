from fractions import Fraction

import pytest

from risp.errors import RispDepthExceeded, RispUnboundSymbol, RispInputError, format_error_chain
from risp.printer import RESET, colorize, pr_str
from risp.reader.parser import read_all
from risp.types.builtin import Builtin
from risp.types.nil import Nil
from risp.types.number import Number
from risp.types.sequence import List, Map
from risp.types.string import String
from risp.types.symbol import Keyword, Symbol


@pytest.mark.parametrize(
    "value,expected",
    [
        (Number(42), "42"),
        (Number(Fraction(-7, 2)), "-7/2"),
        (String("hi there"), '"hi there"'),
        (Keyword(":k"), ":k"),
        (Symbol("foo"), "foo"),
        (Nil, "nil"),
        (Map({Keyword(":a"): Number(1), Keyword(":b"): Number(2)}), "{:a 1 :b 2}"),
        (Builtin("println", print), "#<builtin println>"),
    ]
)
def test_pr_str(value, expected):
    assert pr_str(value) == expected


@pytest.mark.parametrize(
    "source",
    ["(a 1 :k)", "'(1 (2) [3])", "[]", "#{1 2}", '(println "x" -4)', "{:a [1]}"],
)
def test_printed_source_reads_back(source):
    [value] = read_all(source)
    assert read_all(pr_str(value)) == [value]


def test_colorize_wraps_atoms():
    text = colorize(read_all("'(a 1)")[0])
    assert text.startswith("'(")
    assert text.count(RESET) == 2
    assert "a" in text and "1" in text


def test_printing_past_the_python_stack_is_depth_exceeded():
    value = List()
    for _ in range(5000):
        value = List([value])
    with pytest.raises(RispDepthExceeded, match="too deep to print"):
        pr_str(value)
    with pytest.raises(RispDepthExceeded):
        colorize(value)


def test_error_chain_outermost_first():
    err = RispUnboundSymbol("Unbound symbol: foo")
    err.add_note("while calling println")
    err.add_note("Error evaluating ast")
    assert format_error_chain(err) == (
        "Error: Error evaluating ast\n"
        "Caused by: while calling println\n"
        "Caused by: Unbound symbol: foo"
    )


def test_error_chain_follows_causes():
    try:
        try:
            raise OSError("disk on fire")
        except OSError as e:
            raise RispInputError("Error: read failed") from e
    except RispInputError as err:
        text = format_error_chain(err)
    assert text == "Error: Error: read failed\nCaused by: disk on fire"


def test_error_chain_without_notes():
    assert format_error_chain(RispUnboundSymbol("x")) == "Error: x"
