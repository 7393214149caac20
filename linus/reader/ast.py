"""Expression tree nodes produced by the parser.

Every node is frozen and owns its children outright; trees never share
subtrees.
"""

from __future__ import annotations

from dataclasses import dataclass

from linus.reader.tokens import Token


@dataclass(frozen=True)
class Assignment:
    name: str
    type_decl: str
    expr: "Expr"


@dataclass(frozen=True)
class Literal:
    token: Token


@dataclass(frozen=True)
class FunctionCall:
    """A head (operator or name token) applied to any number of operands."""

    operator: Token
    operands: tuple["Expr", ...] = ()


@dataclass(frozen=True)
class Operator:
    """A bare operator token standing where an operand or head was expected."""

    token: Token


@dataclass(frozen=True)
class Variable:
    name: Token


Expr = Assignment | Literal | FunctionCall | Operator | Variable
