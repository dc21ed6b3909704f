"""Render values back into source syntax, optionally with ANSI colours."""

from __future__ import annotations

from risp.errors import RispDepthExceeded
from risp.types.builtin import Builtin
from risp.types.nil import NilType
from risp.types.number import Number
from risp.types.sequence import Form, List, Map, Set, Vector
from risp.types.string import String
from risp.types.symbol import Keyword, Symbol

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_KEYWORD = "\033[96m"
COLOR_NUMBER = "\033[93m"
COLOR_STRING = "\033[92m"
COLOR_NIL = "\033[90m"
COLOR_BUILTIN = "\033[95m"

# (open, close) per sequence type; maps are printed separately
BRACKETS = {
    Form: ("(", ")"),
    List: ("'(", ")"),
    Vector: ("[", "]"),
    Set: ("#{", "}"),
}


def _paint(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{RESET}" if enabled else text


def pr_str(value, color: bool = False) -> str:
    """Return the source representation of ``value``."""
    try:
        return _pr_str(value, color)
    except RecursionError:
        raise RispDepthExceeded("Nesting too deep to print") from None


def _pr_str(value, color: bool) -> str:
    match value:
        case Number():
            return _paint(str(value), COLOR_NUMBER, color)
        case String(text):
            return _paint(f'"{text}"', COLOR_STRING, color)
        case Keyword(name):
            return _paint(name, COLOR_KEYWORD, color)
        case Symbol(name):
            return _paint(name, COLOR_SYMBOL, color)
        case NilType():
            return _paint("nil", COLOR_NIL, color)
        case Map():
            pairs = (f"{_pr_str(k, color)} {_pr_str(v, color)}" for k, v in value.entries())
            return "{" + " ".join(pairs) + "}"
        case Form() | List() | Vector() | Set():
            opener, closer = BRACKETS[type(value)]
            return opener + " ".join(_pr_str(x, color) for x in value) + closer
        case Builtin(name):
            return _paint(f"#<builtin {name}>", COLOR_BUILTIN, color)
    return repr(value)


def colorize(value) -> str:
    """Shorthand for ``pr_str(value, color=True)``."""
    return pr_str(value, color=True)
