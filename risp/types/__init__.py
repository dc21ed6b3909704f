"""Tagged value model: atoms, sequences, built-ins and the namespace."""

from risp.types.atom import Atom
from risp.types.builtin import Builtin
from risp.types.nil import Nil, NilType
from risp.types.number import Number
from risp.types.sequence import Form, List, Map, Sequence, Set, Vector
from risp.types.string import String
from risp.types.symbol import Keyword, Symbol

__all__ = [
    "Atom", "Builtin", "Nil", "NilType", "Number", "String", "Keyword", "Symbol",
    "Sequence", "Form", "List", "Vector", "Map", "Set",
]
