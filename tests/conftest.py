import io

import pytest

from risp.interpreter import Interpreter
from risp.repl import Session
from risp.types.namespace import get_namespace


@pytest.fixture
def namespace():
    """The process-wide namespace with the core builtins."""
    return get_namespace()


@pytest.fixture
def interp(namespace):
    return Interpreter(namespace=namespace)


class ScriptedInput:
    """Stand-in for the line reader: replays lines, then raises EOFError.

    An exception instance in the script is raised instead of returning a line.
    """

    def __init__(self, script):
        self.script = list(script)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.script:
            raise EOFError
        item = self.script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


@pytest.fixture
def make_session(interp):
    """Build a session over a scripted input; returns (session, out, err)."""
    def _make(*script, keep_going=False, interpreter=None, out=None):
        out, err = out or io.StringIO(), io.StringIO()
        session = Session(
            ScriptedInput(script),
            interpreter or interp,
            keep_going=keep_going,
            prompt="risp >> ",
            out=out,
            err=err,
        )
        return session, out, err
    return _make
