from __future__ import annotations

import logging
from typing import TextIO

from kappa import SExpression, LispValue
from kappa.builtin.env_builtin import register
from kappa.config import get_prompt
from kappa.errors import EndOfInput
from kappa.evaluation.evaluator import evaluate
from kappa.printer import to_lisp_string
from kappa.reader.reader import NO_VALUE, Reader
from kappa.types.environment import Environment
from kappa.types.nil import Empty

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Owns the global frame and evaluates Kappa code against it.
    State persists across calls, so definitions accumulate.
    """
    def __init__(self):
        self.env = Environment()
        register(self.env)

    def eval_expr(self, expr: SExpression) -> LispValue:
        """Evaluate one already-read value in the global frame."""
        return evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Read and evaluate every expression in `code`; return the last value."""
        result = Empty
        for expr in Reader(code).read_all():
            result = self.eval_expr(expr)
        return result

    def eval_all(self, code: str) -> list[LispValue]:
        return [self.eval_expr(expr) for expr in Reader(code).read_all()]

    def repl(self, reader: Reader, out: TextIO, prompt: str | None = None) -> None:
        """Prompt, read, evaluate, print until the reader runs out of input.

        Errors propagate to the caller; end of input prints `program done`.
        """
        prompt = get_prompt() if prompt is None else prompt
        while True:
            out.write(prompt)
            try:
                expr = reader.read()
            except EndOfInput:
                out.write("program done\n")
                out.flush()
                return
            if expr is not NO_VALUE:
                logger.debug("read %r", expr)
                out.write(to_lisp_string(self.eval_expr(expr)))
            out.write("\n")
