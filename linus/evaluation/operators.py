from __future__ import annotations

import math
from functools import reduce
from typing import Callable

from linus import Value
from linus.errors import LinusArityError, LinusRuntimeError, LinusTypeError
from linus.reader.tokens import SPELLINGS, TokenType
from linus.types.values import Bool, NoneType, Num, type_name

# -------------------------------
# Number operators
# -------------------------------
def divide(a: float, b: float) -> float:
    # IEEE-754 division: x/0 is a signed infinity, 0/0 is NaN
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


NUMBER_OPERATORS: dict[TokenType, Callable[[float, float], Value]] = {
    TokenType.ADD: lambda a, b: Num(a + b),
    TokenType.SUBTRACT: lambda a, b: Num(a - b),
    TokenType.MULTIPLY: lambda a, b: Num(a * b),
    TokenType.DIVIDE: lambda a, b: Num(divide(a, b)),
    TokenType.GREATER_THAN: lambda a, b: Bool(a > b),
    TokenType.LESS_THAN: lambda a, b: Bool(a < b),
    TokenType.GREATER_THAN_OR_EQUAL: lambda a, b: Bool(a >= b),
    TokenType.LESS_THAN_OR_EQUAL: lambda a, b: Bool(a <= b),
    TokenType.EQUAL: lambda a, b: Bool(a == b),
}

# -------------------------------
# Boolean operators
# -------------------------------
BOOL_OPERATORS: dict[TokenType, Callable[[bool, bool], Value]] = {
    TokenType.AND: lambda a, b: Bool(a and b),
    TokenType.OR: lambda a, b: Bool(a or b),
    TokenType.EQUAL: lambda a, b: Bool(a == b),
}

BINARY_OPERATORS = frozenset(NUMBER_OPERATORS) | frozenset(BOOL_OPERATORS)


def apply_binary(op: TokenType, left: Value, right: Value) -> Value:
    """Combine one pair of operands, dispatching on both value variants."""
    match left, right:
        case Num(value=a), Num(value=b):
            if op in NUMBER_OPERATORS:
                return NUMBER_OPERATORS[op](a, b)
            raise LinusRuntimeError(f"Unexpected operator '{SPELLINGS[op]}' for num operands")
        case Bool(value=a), Bool(value=b):
            if op in BOOL_OPERATORS:
                return BOOL_OPERATORS[op](a, b)
            raise LinusRuntimeError(f"Unexpected operator '{SPELLINGS[op]}' for bool operands")
        case Bool(), Num():
            raise LinusTypeError("Cannot compare Bool and Num")
        case Num(), Bool():
            raise LinusTypeError("Cannot compare Num and Bool")
    raise LinusRuntimeError("Runtime Error: something wrong with operands!")


def fold(op: TokenType, values: list[Value]) -> Value:
    """Left-fold `values` pairwise: `+ 1 2 3` is `(1 + 2) + 3`.

    A single operand is returned unchanged.
    """
    if not values:
        raise LinusArityError(f"Not enough arguments to function '{SPELLINGS[op]}'")
    return reduce(lambda acc, v: apply_binary(op, acc, v), values)


# -------------------------------
# Logical negation
# -------------------------------
def negate(value: Value) -> Value:
    match value:
        case Bool(value=b):
            return Bool(not b)
        case NoneType():
            return Bool(True)
    raise LinusTypeError(f"Cannot apply function 'not' to type {type_name(value)}")
