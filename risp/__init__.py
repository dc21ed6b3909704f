# Core type aliases for risp's data model.
# Every runtime datum is one of the tagged classes in risp.types: an Atom
# (Number, Symbol, String, Keyword, Nil) or a Sequence (Form, List, Vector,
# Map, Set).
#
# Naming guidance:
# - SExpression: Use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to the same union; the split only documents intent.

from __future__ import annotations

from typing import Union

from risp.types.nil import NilType, Nil
from risp.types.number import Number
from risp.types.string import String
from risp.types.atom import Atom
from risp.types.symbol import Keyword, Symbol
from risp.types.sequence import Form, List, Map, Sequence, Set, Vector
from risp.types.builtin import Builtin, BuiltinFn

# Runtime value alias
LispValue = Union[Atom, Sequence, Builtin]
# Forms alias, used by the reader
SExpression = LispValue

__version__ = "0.1.0"
