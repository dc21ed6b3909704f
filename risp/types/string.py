from __future__ import annotations

from risp.types.atom import Atom


class String(Atom):
    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value: str):
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, String) and self.value == other.value

    def __hash__(self) -> int:
        return hash((String, self.value))

    def __repr__(self):
        return f"String({self.value!r})"

    def __str__(self):
        return self.value
