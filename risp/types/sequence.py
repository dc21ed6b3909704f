"""Container values.

Form is the only sequence the evaluator applies; List, Vector, Map and Set
are self-quoting data. Children are appended while the reader builds a
node and afterwards only by built-ins that extend a sequence (``conj``).
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from risp.errors import RispUnsupportedOperation
from risp.types.atom import Atom


class Sequence:
    """Base class for container values."""

    __slots__ = ("items",)
    __hash__ = None  # mutable, so never a Map key or Set element

    def add(self, value) -> None:
        """Append one child while the node is being built."""
        raise RispUnsupportedOperation(f"Cannot add elements to a {type(self).__name__}")

    def conj(self, value) -> Sequence:
        """Append ``value`` to the end and return this sequence."""
        raise RispUnsupportedOperation(f"conj is not supported on {type(self).__name__}")

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator:
        return iter(self.items)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.items == other.items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.items!r})"


class _Ordered(Sequence):
    __slots__ = ()

    def __init__(self, items: Optional[Iterable] = None):
        self.items: list = list(items) if items is not None else []

    def add(self, value) -> None:
        self.items.append(value)

    def __getitem__(self, index):
        return self.items[index]


class Form(_Ordered):
    """An evaluable call: operator followed by argument expressions."""

    __slots__ = ()

    @property
    def head(self):
        return self.items[0] if self.items else None

    @property
    def args(self) -> list:
        return self.items[1:]


class List(_Ordered):
    """A quoted list, read from ``'( ... )``."""

    __slots__ = ()

    def conj(self, value) -> List:
        self.items.append(value)
        return self


class Vector(_Ordered):
    """A quoted positional sequence, read from ``[ ... ]``."""

    __slots__ = ()


def _require_atom(value, role: str) -> None:
    if not isinstance(value, Atom):
        raise RispUnsupportedOperation(
            f"{role} must be an atom, not a {type(value).__name__}"
        )


class Map(Sequence):
    """A quoted mapping from atom keys to values, read from ``{ k v ... }``."""

    __slots__ = ()

    def __init__(self, entries=None):
        self.items: dict = {}
        if entries is not None:
            pairs = entries.items() if isinstance(entries, dict) else entries
            for key, value in pairs:
                self.assoc(key, value)

    def assoc(self, key, value) -> None:
        _require_atom(key, "Map key")
        self.items[key] = value

    def get(self, key, default=None):
        return self.items.get(key, default)

    def entries(self):
        return self.items.items()

    def __contains__(self, key) -> bool:
        return isinstance(key, Atom) and key in self.items

    def __getitem__(self, key):
        return self.items[key]


class Set(Sequence):
    """A quoted collection of unique atoms, read from ``#{ ... }``."""

    __slots__ = ()

    def __init__(self, elements: Optional[Iterable] = None):
        # dict keeps insertion order for printing; equality ignores it
        self.items: dict = {}
        for element in elements or ():
            self.add(element)

    def add(self, value) -> None:
        _require_atom(value, "Set element")
        self.items[value] = None

    def __contains__(self, value) -> bool:
        return isinstance(value, Atom) and value in self.items

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Set) and self.items.keys() == other.items.keys()
