"""Built-in functions for the risp namespace.

Each built-in takes the evaluated arguments as one list and returns a value.
Adding a built-in means adding an entry to BUILTINS.
"""
from __future__ import annotations

from risp import LispValue
from risp.errors import RispArityError, RispUnsupportedOperation
from risp.printer import pr_str
from risp.types.builtin import Builtin, BuiltinFn
from risp.types.nil import Nil
from risp.types.sequence import Sequence


def println(args: list[LispValue]) -> LispValue:
    """Print every argument, space separated, then a newline. Returns nil."""
    print(" ".join(pr_str(a) for a in args))
    return Nil


def conj(args: list[LispValue]) -> LispValue:
    """(conj seq v) appends v to the end of seq and returns seq."""
    if len(args) != 2:
        raise RispArityError(f"conj expected 2 args, found: {len(args)}")
    seq, value = args
    if not isinstance(seq, Sequence):
        raise RispUnsupportedOperation(f"conj is not supported on {type(seq).__name__}")
    return seq.conj(value)


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, BuiltinFn] = {
    "println": println,
    "conj": conj,
}


def register() -> dict[str, Builtin]:
    return {name: Builtin(name, fn) for name, fn in BUILTINS.items()}
