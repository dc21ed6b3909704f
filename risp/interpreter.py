from __future__ import annotations

from typing import Callable, Optional

from risp import SExpression, LispValue
from risp.config import clamp_depth
from risp.evaluation.evaluator import evaluate
from risp.reader.parser import read_all
from risp.types.namespace import Namespace, get_namespace
from risp.types.nil import Nil


class Interpreter:
    """
    Orchestrates reading and evaluating risp code.
    Holds the namespace and reader limits used across calls.
    ``eval_fn`` replaces the evaluator, e.g. to trace or sandbox it.
    """

    def __init__(
        self,
        namespace: Namespace | None = None,
        max_depth: int | None = None,
        eval_fn: Callable[[SExpression, Namespace], LispValue] | None = None,
    ):
        self.namespace: Namespace = namespace if namespace is not None else get_namespace()
        self.max_depth: Optional[int] = clamp_depth(max_depth) if max_depth is not None else None
        self.eval_fn = eval_fn or evaluate

    def read(self, code: str) -> list[SExpression]:
        return read_all(code, self.max_depth)

    def eval_values(self, values: list[SExpression]) -> list[LispValue]:
        return [self.eval_fn(value, self.namespace) for value in values]

    def eval(self, code: str) -> LispValue | list[LispValue]:
        """Evaluate every value in ``code``.

        Host-side convenience: returns ``Nil`` for no values, the result
        itself for one, and a Python list of results for several. The list
        is never handed back to risp code; use ``eval_values`` for a
        uniform result.
        """
        results = self.eval_values(self.read(code))
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results
