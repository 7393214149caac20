"""Tree-walking evaluator for Linus.

Evaluates one expression tree against an Environment. Operator calls
evaluate every operand eagerly, left to right, and fold the results
pairwise; `not` looks only at its first operand. Any failure is raised as a
LinusRuntimeError subclass and stops evaluation.
"""

from __future__ import annotations

from linus import Value
from linus.errors import (
    LinusArityError,
    LinusInvalidExpressionError,
    LinusNameError,
    LinusUndefinedFunctionError,
)
from linus.evaluation.operators import BINARY_OPERATORS, fold, negate
from linus.reader.ast import Assignment, Expr, FunctionCall, Literal, Variable
from linus.reader.tokens import Token, TokenType
from linus.types.environment import Environment
from linus.types.values import NONE, Bool, Num, Str


def literal_value(token: Token) -> Value:
    match token.type:
        case TokenType.STR:
            return Str(token.value)
        case TokenType.NUM:
            return Num(token.value)
        case TokenType.TRUE:
            return Bool(True)
        case TokenType.FALSE:
            return Bool(False)
        case TokenType.NONE | TokenType.EOF:
            return NONE
        case TokenType.SYMBOL:
            return Str(token.value)
    raise LinusInvalidExpressionError(f"Not a literal: {token.type.name}")


class Evaluator:
    """Evaluates expression trees, reading and writing one Environment."""

    __slots__ = ("env",)

    def __init__(self, env: Environment | None = None):
        self.env = env if env is not None else Environment()

    def evaluate(self, expr: Expr) -> Value:
        match expr:
            case Literal(token=token):
                return literal_value(token)
            case Assignment(name=name, expr=inner):
                # the declared type is not checked against the value
                self.env.define(name, self.evaluate(inner))
                return NONE
            case Variable(name=token):
                if token.type is not TokenType.SYMBOL:
                    raise LinusNameError(f"Invalid variable name: {token!r}")
                return self.env.lookup(token.value)
            case FunctionCall(operator=head, operands=operands):
                return self.call(head, operands)
        raise LinusInvalidExpressionError(f"Invalid expression: {expr!r}")

    def call(self, head: Token, operands: tuple[Expr, ...]) -> Value:
        if head.type in BINARY_OPERATORS:
            values = [self.evaluate(operand) for operand in operands]
            return fold(head.type, values)
        if head.type is TokenType.NOT:
            if not operands:
                raise LinusArityError("Not enough arguments to function 'not'")
            return negate(self.evaluate(operands[0]))
        name = head.value if head.type is TokenType.SYMBOL else head.type.name
        raise LinusUndefinedFunctionError(f"Function does not exist: {name}")


def evaluate(expr: Expr, env: Environment) -> Value:
    """Evaluate a single tree against `env`."""
    return Evaluator(env).evaluate(expr)
