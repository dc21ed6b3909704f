"""Interactive session loop for risp.

Reads one line at a time through a ``read_line(prompt)`` callable, then
reads, evaluates and prints every value on it. ``read_line`` returns the
line, raises EOFError at end of input and KeyboardInterrupt when the user
interrupts; anything else it raises is treated as a fatal read error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from risp import __version__
from risp.config import get_history_path, get_prompt
from risp.errors import RispError, RispInputError, RispInterrupted, format_error_chain
from risp.interpreter import Interpreter
from risp.printer import colorize, pr_str

logger = logging.getLogger(__name__)

BANNER = "** risp **"


class ReadlineInput:
    """Line reader backed by GNU readline, with a persistent history file."""

    def __init__(self, history_path: Optional[Path] = None, history_length: int = 1000):
        self.history_path = history_path
        self.history_length = history_length

    def start(self) -> None:
        import readline
        readline.set_history_length(self.history_length)
        if self.history_path is None:
            return
        try:
            readline.read_history_file(self.history_path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("could not load history from %s: %s", self.history_path, e)

    def close(self) -> None:
        if self.history_path is None:
            return
        import readline
        try:
            readline.write_history_file(self.history_path)
        except OSError as e:
            logger.warning("could not save history to %s: %s", self.history_path, e)

    def __call__(self, prompt: str) -> str:
        # input() records non-empty lines in the readline history
        return input(prompt)

    def __enter__(self) -> ReadlineInput:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class Session:
    """One read-eval-print session.

    By default the first parse or evaluation error ends the session. With
    ``keep_going`` the error is reported on ``err`` and the next line is
    read instead. Interrupts and fatal read errors always end it.
    """

    def __init__(
        self,
        read_line: Callable[[str], str],
        interpreter: Interpreter | None = None,
        keep_going: bool = False,
        prompt: str | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
        color: bool | None = None,
    ):
        self.read_line = read_line
        self.interpreter = interpreter if interpreter is not None else Interpreter()
        self.keep_going = keep_going
        self.prompt = prompt if prompt is not None else get_prompt()
        self._out = out
        self._err = err
        self._color = color

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    @property
    def color(self) -> bool:
        """Colour results when asked to, or by default when ``out`` is a terminal."""
        if self._color is not None:
            return self._color
        isatty = getattr(self.out, "isatty", None)
        return bool(isatty and isatty())

    def read(self) -> Optional[str]:
        """Return the next line, or None at end of input."""
        try:
            return self.read_line(self.prompt)
        except EOFError:
            return None
        except KeyboardInterrupt:
            print("CTRL-C", file=self.out)
            raise RispInterrupted("Interrupted!") from None
        except Exception as e:
            raise RispInputError(f"Error: {e!r}") from e

    def step(self, line: str) -> list:
        """Read, evaluate and print every value on ``line``."""
        try:
            values = self.interpreter.read(line)
        except RispError as e:
            e.add_note("Error parsing tokens into s-expressions")
            raise
        logger.debug("ast: %r", values)

        results = []
        for value in values:
            try:
                result = self.interpreter.eval_values([value])[0]
            except RispError as e:
                e.add_note("Error evaluating ast")
                raise
            results.append(result)
            print(colorize(result) if self.color else pr_str(result), file=self.out)
        return results

    def loop(self) -> None:
        """Run until end of input; errors that end the session propagate."""
        while True:
            try:
                line = self.read()
            except RispError as e:
                e.add_note("Error reading user input")
                raise
            if line is None:
                print("Exiting...", file=self.out)
                return
            if not line.strip():
                continue
            try:
                self.step(line)
            except KeyboardInterrupt:
                print("CTRL-C", file=self.out)
                err = RispInterrupted("Interrupted!")
                err.add_note("Error evaluating ast")
                raise err from None
            except RispError as e:
                if not self.keep_going:
                    raise
                print(format_error_chain(e), file=self.err)

    def run(self) -> int:
        """Run the session and return the process exit status."""
        try:
            self.loop()
        except RispError as e:
            print(format_error_chain(e), file=self.err)
            return 1
        return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="risp", description="Interactive risp reader/evaluator")
    parser.add_argument("--keep-going", action="store_true",
                        help="report errors and keep reading instead of exiting")
    parser.add_argument("--max-depth", type=int, default=None,
                        help="maximum nesting depth accepted by the reader")
    parser.add_argument("--history", type=Path, default=None,
                        help="history file (default: $RISP_HISTORY or ~/.risp_history.txt)")
    parser.add_argument("--no-history", action="store_true", help="do not load or save history")
    parser.add_argument("--debug", action="store_true", help="log tokens, values and results")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.max_depth is not None and args.max_depth < 1:
        print("risp: --max-depth must be positive", file=sys.stderr)
        return 2

    history = None if args.no_history else (args.history or get_history_path())
    print(BANNER)
    with ReadlineInput(history) as read_line:
        session = Session(
            read_line,
            Interpreter(max_depth=args.max_depth),
            keep_going=args.keep_going,
        )
        return session.run()


if __name__ == "__main__":
    sys.exit(main())
