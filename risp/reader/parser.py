"""
  Reader

Recursive-descent parser over the lexer's token stream. Builds the tagged
value tree:

    - ( ... )   -> Form
    - '( ... )  -> List
    - [ ... ]   -> Vector
    - { ... }   -> Map   (alternating atom keys and values)
    - #{ ... }  -> Set   (atom elements)
    - "..."     -> String
    - :name     -> Keyword
    - 42, -7    -> Number (exact integer)
    - 3.5, 1e3  -> Number (exact value of the decimal text)
    - nil       -> Nil
    - anything else -> Symbol

Nesting is tracked with an explicit depth counter and capped at
``max_depth`` so adversarial input cannot exhaust the Python stack.
"""

from __future__ import annotations

import logging
import re
from fractions import Fraction
from typing import Iterable, Iterator, Optional

from risp import SExpression
from risp.config import clamp_depth, get_max_depth
from risp.errors import (
    RispDepthExceeded,
    RispInvalidAtom,
    RispMalformedCollection,
    RispMalformedLiteral,
    RispUnexpectedClose,
    RispUnexpectedEnd,
)
from risp.reader.lexer import lex
from risp.types.atom import Atom
from risp.types.nil import Nil
from risp.types.number import Number
from risp.types.sequence import Form, List, Map, Sequence, Set, Vector
from risp.types.string import String
from risp.types.symbol import Keyword, Symbol

logger = logging.getLogger(__name__)


INTEGER_RE = re.compile(r"[+-]?\d+")
DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE](?P<exp>[+-]?\d+))?")

# Widest decimal exponent accepted; covers the whole double range
MAX_EXPONENT = 400

# opener token kind -> (sequence type, closing text)
OPENERS: dict[str, tuple[type, str]] = {
    "lparen": (Form, ")"),
    "quote_list": (List, ")"),
    "lbracket": (Vector, "]"),
    "lbrace": (Map, "}"),
    "set_literal": (Set, "}"),
}

CLOSERS = {"rparen", "rbracket", "rbrace"}


def read_atom(text: str) -> Atom:
    """Classify one token's text as an atom; first matching rule wins."""
    if text.startswith('"'):
        if len(text) >= 2 and text.endswith('"') and '"' not in text[1:-1]:
            return String(text[1:-1])
        raise RispMalformedLiteral(f"Unterminated string literal: {text}")

    if text.startswith(":"):
        return Keyword(text)

    if INTEGER_RE.fullmatch(text):
        try:
            return Number(int(text))
        except ValueError:
            # past sys.get_int_max_str_digits()
            raise RispMalformedLiteral(f"Integer literal too long: {text[:32]}...") from None

    if m := DECIMAL_RE.fullmatch(text):
        exp = m.group("exp")
        if exp is not None and (len(exp) > 6 or abs(int(exp)) > MAX_EXPONENT):
            raise RispMalformedLiteral(f"Exponent out of range: {text}")
        try:
            # Fraction reads decimal text exactly: "0.1" -> 1/10
            return Number(Fraction(text))
        except ValueError:
            raise RispMalformedLiteral(f"Decimal literal too long: {text[:32]}...") from None

    if text == "nil":
        return Nil

    if not text:
        raise RispInvalidAtom("Empty token")
    return Symbol(text)


class TokenStream:
    """Forward-only cursor over ``(kind, text)`` tokens."""

    def __init__(self, tokens: Iterable[tuple[str, str]], max_depth: Optional[int] = None):
        self.tokens: Iterator[tuple[str, str]] = iter(tokens)
        self.max_depth: int = clamp_depth(max_depth) if max_depth is not None else get_max_depth()

    def parse(self, enclosing: Sequence, depth: int = 0) -> Sequence:
        """Parse tokens into ``enclosing`` until its closer, then return it.

        At depth 0 there is no closer: tokens are read until the stream ends.
        Deeper levels must see their closer; running out of tokens there is
        a RispUnexpectedEnd.
        """
        closer = OPENERS[_opener_kind(enclosing)][1] if depth else None
        pending_key = _NO_KEY

        for kind, text in self.tokens:
            if kind in CLOSERS:
                if closer is None:
                    raise RispUnexpectedClose(f"Unexpected '{text}' with no matching opener")
                if text != closer:
                    raise RispUnexpectedClose(f"Expected '{closer}' but found '{text}'")
                if pending_key is not _NO_KEY:
                    raise RispMalformedCollection(
                        f"Map literal has a key with no value: {pending_key}"
                    )
                return enclosing

            if kind == "fn_literal":
                raise RispInvalidAtom("Anonymous function literals '#(' are not supported")

            if kind in OPENERS:
                if depth + 1 > self.max_depth:
                    raise RispDepthExceeded(
                        f"Nesting deeper than {self.max_depth} levels"
                    )
                seq_type, _ = OPENERS[kind]
                value = self.parse(seq_type(), depth + 1)
            else:
                try:
                    value = read_atom(text)
                except RispMalformedLiteral as e:
                    e.add_note(f"Error parsing value: {text}")
                    raise

            pending_key = self._add(enclosing, value, pending_key)

        if closer is not None:
            raise RispUnexpectedEnd(
                f"Unexpected end of input, expected closing delimiter '{closer}'"
            )
        return enclosing

    @staticmethod
    def _add(enclosing: Sequence, value: SExpression, pending_key):
        """Append ``value``; for maps, pair it with the pending key."""
        if isinstance(enclosing, Map):
            if pending_key is _NO_KEY:
                if not isinstance(value, Atom):
                    raise RispMalformedCollection(
                        f"Map keys must be atoms, not {type(value).__name__}"
                    )
                if value in enclosing:
                    raise RispMalformedCollection(f"Duplicate map key: {value}")
                return value
            enclosing.assoc(pending_key, value)
            return _NO_KEY

        if isinstance(enclosing, Set):
            if not isinstance(value, Atom):
                raise RispMalformedCollection(
                    f"Set elements must be atoms, not {type(value).__name__}"
                )
            if value in enclosing:
                raise RispMalformedCollection(f"Duplicate set element: {value}")

        enclosing.add(value)
        return _NO_KEY

    def parse_all(self) -> list[SExpression]:
        """Parse every top-level value left in the stream."""
        return self.parse(Form()).items


class _NoKey:
    __slots__ = ()

    def __repr__(self):
        return "<no key>"


_NO_KEY = _NoKey()


def _opener_kind(seq: Sequence) -> str:
    for kind, (seq_type, _) in OPENERS.items():
        if type(seq) is seq_type:
            return kind
    raise TypeError(f"Cannot parse into a {type(seq).__name__}")


def parse(tokens: Iterable[tuple[str, str]], enclosing: Sequence,
          depth: int = 0, max_depth: Optional[int] = None) -> Sequence:
    """Parse ``tokens`` into ``enclosing`` and return it."""
    return TokenStream(tokens, max_depth).parse(enclosing, depth)


def read_all(source: str, max_depth: Optional[int] = None) -> list[SExpression]:
    """Lex and parse every top-level value of ``source``."""
    try:
        values = TokenStream(lex(source), max_depth).parse_all()
    except RecursionError:
        raise RispDepthExceeded("Nesting too deep to read") from None
    for value in values:
        logger.debug("read %r", value)
    return values
