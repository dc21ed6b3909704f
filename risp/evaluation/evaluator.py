"""Core evaluator for risp.

A single pass over the value tree. Forms are applied, symbols are resolved
in the namespace, everything else evaluates to itself. There are no local
bindings and no special forms: quoting is decided by the reader.
"""

from __future__ import annotations

import logging
from typing import Optional

from risp import LispValue
from risp.errors import RispDepthExceeded, RispError, RispNotCallable
from risp.printer import pr_str
from risp.types.builtin import Builtin
from risp.types.namespace import Namespace, get_namespace
from risp.types.nil import NilType
from risp.types.number import Number
from risp.types.sequence import Form, List, Map, Set, Vector
from risp.types.string import String
from risp.types.symbol import Keyword, Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: LispValue, namespace: Optional[Namespace] = None) -> LispValue:
    """Evaluate ``expr`` against ``namespace`` (the global one by default)."""
    if namespace is None:
        namespace = get_namespace()
    try:
        return _evaluate(expr, namespace)
    except RecursionError:
        raise RispDepthExceeded("Nesting too deep to evaluate") from None


def _evaluate(expr: LispValue, namespace: Namespace) -> LispValue:
    match expr:
        case Number() | String() | Keyword() | NilType():
            return expr

        case Symbol():
            return namespace.lookup(expr)

        case Form(items=[]):
            return List()

        case Form(items=[head, *tail_args]):
            fn = _evaluate(head, namespace)
            if not isinstance(fn, Builtin):
                raise RispNotCallable(f"{pr_str(fn)} is not callable")
            args = [_evaluate(arg, namespace) for arg in tail_args]
            try:
                result = fn(args)
            except RispError as e:
                e.add_note(f"while calling {fn.name}")
                raise
            logger.debug("(%s ...) -> %r", fn.name, result)
            return result

        # --- Quoted data is returned untouched ---
        case List() | Vector() | Map() | Set():
            return expr

        case Builtin():
            return expr

    raise TypeError(f"Cannot evaluate {type(expr).__name__}: {expr!r}")
