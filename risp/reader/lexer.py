"""
  Lexer

Splits source text into a lazy stream of ``(kind, text)`` tokens:

    - structural delimiters: ( #( '( ) [ ] { #{ }
    - string literals:       "..." (never crossing " ) ] })
    - atoms:                 any other run of non-space characters

An opening quote with no closing quote before the next ) ] } or the end of
input is emitted as an ``atom`` token that still starts with '"'. The
lexer never rejects it; the reader does.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

logger = logging.getLogger(__name__)


TOKEN_RE = re.compile(
    r"(?P<fn_literal>\#\()"  # #(
    r"|(?P<set_literal>\#\{)"  # #{
    r"|(?P<quote_list>'\()"  # '(
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r'|(?P<string>"[^")\]}]*")'  # double-quoted strings
    r'|(?P<unterminated>"[^")\]}]*)'  # opening quote that never closes
    r'|(?P<atom>[^\s")\]}]+)'  # fallback: symbols, numbers, keywords
)

WHITESPACE_RE = re.compile(r"\s*")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while True:
        pos = WHITESPACE_RE.match(source, pos).end()
        if pos >= n:
            return
        m = TOKEN_RE.match(source, pos)
        kind = m.lastgroup
        text = m.group(kind)
        if kind == "unterminated":
            kind = "atom"
        logger.debug("token %s %r", kind, text)
        yield kind, text
        pos = m.end()


def tokenize(source: str) -> list[str]:
    """Return just the token texts of ``source``, in order."""
    return [text for _, text in lex(source)]
