import math

import pytest

from linus.types.values import NONE, Bool, Function, Num, Str, format_number, format_value, type_name


@pytest.mark.parametrize(
    "n,expected",
    [
        (3.0, "3"),
        (2.5, "2.5"),
        (0.0, "0"),
        (-0.0, "-0"),
        (-4.0, "-4"),
        (1e20, "100000000000000000000"),
        (1e-7, "0.0000001"),
        (0.1 + 0.2, "0.30000000000000004"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "NaN"),
    ]
)
def test_format_number(n, expected):
    assert format_number(n) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (Num(7.0), "7"),
        (Str('"quoted"'), '"quoted"'),
        (Bool(True), "true"),
        (Bool(False), "false"),
        (NONE, None),
        (Function("f"), "<function f>"),
    ]
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_format_value_rejects_python_values():
    with pytest.raises(TypeError):
        format_value(3)


def test_type_names():
    assert [type_name(v) for v in (Num(1.0), Str("s"), Bool(True), NONE, Function("f"))] == [
        "num", "str", "bool", "_", "function",
    ]


def test_bool_is_not_a_number():
    assert Bool(True) != Num(1.0)
