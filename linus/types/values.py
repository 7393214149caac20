"""Runtime values.

Each variant is a small frozen class so the evaluator can dispatch on the
variant (`match`) rather than on Python's own types, where `bool` is an `int`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Num:
    value: float


@dataclass(frozen=True)
class Str:
    value: str


@dataclass(frozen=True)
class Bool:
    value: bool


class NoneType:
    __slots__ = ()

    def __repr__(self): return "none"

    def __eq__(self, other):
        return isinstance(other, NoneType)

    def __hash__(self):
        return hash(NoneType)


NONE = NoneType()


@dataclass(frozen=True)
class Function:
    """Reserved variant: nothing constructs or applies functions yet."""

    name: str


def type_name(value) -> str:
    match value:
        case Num():
            return "num"
        case Str():
            return "str"
        case Bool():
            return "bool"
        case NoneType():
            return "_"
        case Function():
            return "function"
    return type(value).__name__


def format_number(n: float) -> str:
    """Plain decimal text, no exponent and no trailing '.0'."""
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    return format(Decimal(repr(n)).normalize(), "f")


def format_value(value) -> str | None:
    """Text printed for a top-level result; None means print nothing."""
    match value:
        case Num(value=n):
            return format_number(n)
        case Str(value=s):
            return s
        case Bool(value=b):
            return "true" if b else "false"
        case NoneType():
            return None
        case Function(name=name):
            return f"<function {name}>"
    raise TypeError(f"not a runtime value: {value!r}")
