from __future__ import annotations

from risp.types.atom import Atom


class Symbol(Atom):
    __slots__ = ("id",)
    __match_args__ = ("id",)

    def __init__(self, name: str):
        # Not interned: two symbols are equal when their names are
        self.id = name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash((Symbol, self.id))

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


class Keyword(Atom):
    """A self-identifying name such as ``:foo``; the leading colon is kept."""

    __slots__ = ("id",)
    __match_args__ = ("id",)

    def __init__(self, name: str):
        if not name.startswith(":"):
            name = ":" + name
        self.id = name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Keyword) and self.id == other.id

    def __hash__(self) -> int:
        return hash((Keyword, self.id))

    def __repr__(self):
        return f"Keyword({self.id!r})"

    def __str__(self):
        return self.id
