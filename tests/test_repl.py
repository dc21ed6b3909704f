import io

import pytest

from risp.errors import (
    RispDepthExceeded,
    RispInputError,
    RispInterrupted,
    RispUnboundSymbol,
    RispUnexpectedEnd,
)
from risp.config import depth_ceiling
from risp.interpreter import Interpreter
from risp.printer import RESET
from risp.repl import Session, build_arg_parser
from risp.types.builtin import Builtin
from risp.types.namespace import Namespace
from risp.types.nil import Nil
from risp.types.number import Number
from risp.types.sequence import Form, List
from risp.types.symbol import Keyword, Symbol


def test_interpreter_eval(interp):
    assert interp.eval("") is Nil
    assert interp.eval("42") == Number(42)
    assert interp.eval("1 2") == [Number(1), Number(2)]
    assert interp.eval("(conj '(1 2) 3)") == List([Number(1), Number(2), Number(3)])


def test_interpreter_read_does_not_evaluate(interp):
    assert interp.read("(foo)")[0].head.id == "foo"


def test_unbound_symbol_ends_session(make_session):
    session, out, err = make_session("(+ 1 2)", "(conj '() 1)")
    assert session.run() == 1
    assert "Unbound symbol: +" in err.getvalue()
    assert err.getvalue().startswith("Error: Error evaluating ast")
    # the second line is never read
    assert session.read_line.script == ["(conj '() 1)"]


def test_unbound_symbol_propagates_from_loop(make_session):
    session, _, _ = make_session("(+ 1 2)")
    with pytest.raises(RispUnboundSymbol) as info:
        session.loop()
    assert info.value.__notes__ == ["Error evaluating ast"]


def test_conj_result_is_printed(make_session):
    session, out, err = make_session("(conj '(1 2) 3)")
    assert session.run() == 0
    assert out.getvalue() == "'(1 2 3)\nExiting...\n"
    assert err.getvalue() == ""


def test_end_of_input_exits_cleanly(make_session):
    session, out, _ = make_session()
    assert session.run() == 0
    assert out.getvalue() == "Exiting...\n"
    assert session.read_line.prompts == ["risp >> "]


def test_interrupt_ends_session_with_failure(make_session):
    session, out, err = make_session(KeyboardInterrupt(), "1")
    assert session.run() == 1
    assert out.getvalue() == "CTRL-C\n"
    assert "Interrupted!" in err.getvalue()
    assert "Error reading user input" in err.getvalue()


def test_interrupt_is_not_swallowed_by_keep_going(make_session):
    session, _, _ = make_session(KeyboardInterrupt(), keep_going=True)
    with pytest.raises(RispInterrupted):
        session.loop()


def test_fatal_read_error(make_session):
    session, _, err = make_session(OSError("terminal went away"))
    with pytest.raises(RispInputError) as info:
        session.loop()
    assert isinstance(info.value.__cause__, OSError)
    session, _, err = make_session(OSError("terminal went away"))
    assert session.run() == 1
    assert "terminal went away" in err.getvalue()


def test_missing_closer_ends_session(make_session):
    session, _, err = make_session("(1 2")
    with pytest.raises(RispUnexpectedEnd) as info:
        session.loop()
    assert info.value.__notes__ == ["Error parsing tokens into s-expressions"]


def test_keep_going_reports_and_continues(make_session):
    session, out, err = make_session("(1 2", "(foo)", "(conj '() :k)", keep_going=True)
    assert session.run() == 0
    assert "expected closing delimiter" in err.getvalue()
    assert "Unbound symbol: foo" in err.getvalue()
    assert out.getvalue() == "'(:k)\nExiting...\n"


def test_blank_lines_are_skipped(make_session):
    session, out, _ = make_session("", "   ", "1")
    assert session.run() == 0
    assert out.getvalue() == "1\nExiting...\n"


def test_every_value_on_a_line_is_printed(make_session, capsys):
    session, out, _ = make_session('(println "x") :k')
    assert session.run() == 0
    assert capsys.readouterr().out == '"x"\n'
    assert out.getvalue() == "nil\n:k\nExiting...\n"


def test_session_respects_reader_depth():
    session = Session(lambda prompt: "((1))", Interpreter(max_depth=1))
    with pytest.raises(RispDepthExceeded):
        session.step("((1))")


def test_arg_parser_defaults():
    args = build_arg_parser().parse_args([])
    assert not args.keep_going
    assert args.max_depth is None
    assert not args.no_history
    args = build_arg_parser().parse_args(["--keep-going", "--max-depth", "8", "--debug"])
    assert args.keep_going and args.max_depth == 8 and args.debug


def test_interpreter_eval_values_is_uniform(interp):
    assert interp.eval_values(interp.read("1 2")) == [Number(1), Number(2)]
    assert interp.eval_values(interp.read("42")) == [Number(42)]


def test_interpreter_uses_custom_eval_fn(namespace):
    seen = []

    def tracing_eval(value, ns):
        seen.append(value)
        return Nil

    interp = Interpreter(namespace=namespace, eval_fn=tracing_eval)
    assert interp.eval("(+ 1 2) :k") == [Nil, Nil]
    assert seen == [Form([Symbol("+"), Number(1), Number(2)]), Keyword(":k")]


def test_deep_input_with_a_huge_depth_setting_fails_cleanly(make_session):
    interpreter = Interpreter(max_depth=10_000)
    assert interpreter.max_depth == depth_ceiling()
    session, _, err = make_session("(" * 5000 + ")" * 5000, interpreter=interpreter)
    assert session.run() == 1
    assert err.getvalue().startswith("Error: Error parsing tokens into s-expressions")
    assert "Nesting deeper than" in err.getvalue()


class _Terminal(io.StringIO):
    def isatty(self):
        return True


def test_results_are_coloured_on_a_terminal(make_session):
    session, out, _ = make_session("'(a 1)", out=_Terminal())
    assert session.color
    assert session.run() == 0
    assert RESET in out.getvalue()
    assert out.getvalue().endswith("Exiting...\n")


def test_results_are_plain_off_a_terminal(make_session):
    session, out, _ = make_session("'(a 1)")
    assert not session.color
    session.run()
    assert out.getvalue() == "'(a 1)\nExiting...\n"


def test_colour_can_be_forced():
    session = Session(lambda prompt: "", out=_Terminal(), color=False)
    assert not session.color


def _interrupting_interpreter():
    def stop(args):
        raise KeyboardInterrupt
    return Interpreter(namespace=Namespace({"stop": Builtin("stop", stop)}))


def test_interrupt_during_evaluation_ends_session(make_session):
    session, out, err = make_session(
        "(stop)", ":never", interpreter=_interrupting_interpreter(), keep_going=True,
    )
    assert session.run() == 1
    assert out.getvalue() == "CTRL-C\n"
    assert err.getvalue() == "Error: Error evaluating ast\nCaused by: Interrupted!\n"
    assert session.read_line.script == [":never"]


def test_interrupt_during_evaluation_propagates_from_loop(make_session):
    session, _, _ = make_session("(stop)", interpreter=_interrupting_interpreter())
    with pytest.raises(RispInterrupted) as info:
        session.loop()
    assert info.value.__notes__ == ["Error evaluating ast"]
