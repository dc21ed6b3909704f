"""The global namespace: symbol name -> built-in function.

The namespace is built once, on first use, and never mutated afterwards, so
it can be read from anywhere without locking.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from risp.errors import RispUnboundSymbol
from risp.types.builtin import Builtin
from risp.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Namespace:
    """Read-only mapping from names to Builtins."""

    __slots__ = ("_table",)

    def __init__(self, table: Mapping[str, Builtin]):
        self._table: Mapping[str, Builtin] = MappingProxyType(dict(table))

    def lookup(self, symbol: Symbol | str) -> Builtin:
        """Return the Builtin bound to ``symbol``.

        Raises RispUnboundSymbol if the name has no entry.
        """
        name = symbol.id if isinstance(symbol, Symbol) else symbol
        try:
            return self._table[name]
        except KeyError:
            raise RispUnboundSymbol(f"Unbound symbol: {name}") from None

    def names(self) -> list[str]:
        return sorted(self._table)

    def __contains__(self, name: object) -> bool:
        if isinstance(name, Symbol):
            name = name.id
        return name in self._table

    def __getitem__(self, name: str) -> Builtin:
        return self._table[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"<Namespace: {', '.join(self.names())}>"


# Module-level singleton
_namespace: Optional[Namespace] = None


def get_namespace() -> Namespace:
    global _namespace
    if _namespace is None:
        # Lazy import to avoid a cycle with the builtin module
        from risp.builtin.core_builtin import register
        _namespace = Namespace(register())
        logger.debug("namespace initialised with %d builtins: %s",
                     len(_namespace), ", ".join(_namespace.names()))
    return _namespace
