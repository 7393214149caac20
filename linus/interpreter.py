from __future__ import annotations

import logging
import sys
from typing import TextIO

from linus import Expr, Value
from linus.evaluation.evaluator import Evaluator
from linus.reader.lexer import tokenize
from linus.reader.parser import parse
from linus.types.environment import Environment
from linus.types.values import format_value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Runs Linus source: tokenize, parse, then evaluate each top-level
    expression in order, printing its value. Bindings persist across `run`
    calls on the same instance.
    """
    def __init__(self, out: TextIO | None = None):
        self.env = Environment()
        self.evaluator = Evaluator(self.env)
        self.out = out if out is not None else sys.stdout

    def evaluate(self, expr: Expr) -> Value:
        return self.evaluator.evaluate(expr)

    def interpret(self, exprs: list[Expr]) -> list[Value]:
        """Evaluate and print `exprs`; the first failure propagates."""
        results = []
        for index, expr in enumerate(exprs):
            logger.debug("evaluating top-level expression %d: %r", index, expr)
            value = self.evaluate(expr)
            text = format_value(value)
            if text is not None:
                print(text, file=self.out)
            results.append(value)
        return results

    def run(self, source: str) -> list[Value]:
        # Nothing is evaluated unless the whole source parses.
        exprs = parse(tokenize(source))
        return self.interpret(exprs)


def run(source: str, out: TextIO | None = None) -> list[Value]:
    """Run `source` in a fresh interpreter."""
    return Interpreter(out).run(source)
