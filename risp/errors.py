"""Error hierarchy for risp.

Every failure raised by the reader, the evaluator, the built-ins and the
session loop derives from RispError. Context is attached on the way out
with ``add_note``; ``format_error_chain`` renders it outermost first.
"""

from __future__ import annotations


class RispError(Exception):
    """ Base class for all risp errors"""
    pass


class RispSyntaxError(RispError):
    """ Raised when source text cannot be read into values"""


class RispMalformedLiteral(RispSyntaxError):
    """ Raised for a literal that is not well formed, e.g. an unterminated string"""


class RispUnexpectedClose(RispSyntaxError):
    """ Raised when a closing delimiter has no matching opener"""


class RispUnexpectedEnd(RispSyntaxError):
    """ Raised when input ends before a closing delimiter"""


class RispInvalidAtom(RispSyntaxError):
    """ Raised for token text that matches none of the atom grammars"""


class RispMalformedCollection(RispSyntaxError):
    """ Raised for map or set literals with bad keys, elements or arity"""


class RispDepthExceeded(RispSyntaxError):
    """ Raised when nesting goes past the configured reader ceiling"""


class RispArityError(RispError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class RispUnboundSymbol(RispError):
    """ Raised when a symbol has no namespace entry"""


class RispNotCallable(RispError):
    """ Raised when the head of a form does not evaluate to a callable"""


class RispUnsupportedOperation(RispError):
    """ Raised when an operation is applied to an incompatible sequence"""


class RispInterrupted(RispError):
    """ Raised when the user interrupts the session at the prompt"""


class RispInputError(RispError):
    """ Raised when the line reader fails for a reason other than EOF or interrupt"""


def format_error_chain(exc: BaseException) -> str:
    """Render an exception and its context, outermost context first.

    Notes are added innermost first while the error propagates, so they are
    read back in reverse. Explicit causes (``raise ... from``) follow the
    original message.
    """
    notes = list(getattr(exc, "__notes__", ()))
    messages = list(reversed(notes))
    messages.append(str(exc) or type(exc).__name__)
    cause = exc.__cause__
    while cause is not None:
        messages.append(str(cause) or type(cause).__name__)
        cause = cause.__cause__

    lines = [f"Error: {messages[0]}"]
    lines.extend(f"Caused by: {m}" for m in messages[1:])
    return "\n".join(lines)
