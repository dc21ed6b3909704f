from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from risp import LispValue

# Signature every built-in implements
BuiltinFn = Callable[[list], "LispValue"]


class Builtin:
    """A named built-in function, the value a bound symbol evaluates to.

    ``fn`` receives the evaluated arguments as one list and returns a value.
    """

    __slots__ = ("name", "fn")
    __match_args__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: list) -> LispValue:
        return self.fn(args)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Builtin) and self.name == other.name and self.fn is other.fn

    def __hash__(self) -> int:
        return hash((Builtin, self.name))

    def __repr__(self):
        return f"#<builtin {self.name}>"
