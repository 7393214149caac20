import math

import pytest

from linus.errors import (
    LinusArityError,
    LinusInvalidExpressionError,
    LinusNameError,
    LinusRuntimeError,
    LinusTypeError,
    LinusUndefinedFunctionError,
)
from linus.evaluation.evaluator import Evaluator, evaluate, literal_value
from linus.evaluation.operators import apply_binary, divide, fold, negate
from linus.reader.ast import Assignment, FunctionCall, Literal, Operator, Variable
from linus.reader.lexer import tokenize
from linus.reader.parser import parse
from linus.reader.tokens import Token, TokenType
from linus.types.values import NONE, Bool, Function, Num, Str

T = TokenType


def eval_source(source, env):
    """Evaluate every top-level expression and return the last non-none value."""
    result = NONE
    for expr in parse(tokenize(source)):
        value = evaluate(expr, env)
        if value != NONE:
            result = value
    return result


@pytest.mark.parametrize(
    "source,expected",
    [
        ("+ 1 2 3", Num(6.0)),
        ("- 10 2 3", Num(5.0)),
        ("* 2 3 4", Num(24.0)),
        ("/ 12 3", Num(4.0)),
        ("/ 1 2", Num(0.5)),
        ("/ 100 10 5", Num(2.0)),
        ("+ 1 (* 2 3)", Num(7.0)),
        ("+ 1 $ * 2 3", Num(7.0)),
        ("+ 1\n  2\n", Num(3.0)),
        ("+ 7", Num(7.0)),
        ("> 3 2", Bool(True)),
        ("< 3 2", Bool(False)),
        (">= 2 2", Bool(True)),
        ("<= 3 2", Bool(False)),
        ("= 2 2", Bool(True)),
        ("= 2 3", Bool(False)),
        ("= true true", Bool(True)),
        ("= true false", Bool(False)),
        ("and true false", Bool(False)),
        ("and true true true", Bool(True)),
        ("or false true", Bool(True)),
        ("or false false", Bool(False)),
        ("not true", Bool(False)),
        ("not false", Bool(True)),
        ("not none", Bool(True)),
        ("not not true", Bool(True)),
        ('"hello"', Str('"hello"')),
        ("true", Bool(True)),
        ("false", Bool(False)),
        ("3.25", Num(3.25)),
    ]
)
def test_evaluate_expressions(env, source, expected):
    assert eval_source(source, env) == expected


def test_left_fold_is_pairwise_left_to_right(env):
    # (10 - 2) - 3, never 10 - (2 - 3)
    assert eval_source("- 10 2 3", env) == Num(5.0)
    assert eval_source("/ 8 4 2", env) == Num(1.0)


def test_fold_uses_first_result_for_next_step(env):
    # (1 = 1) is a bool, which cannot then be compared with a number
    with pytest.raises(LinusTypeError):
        eval_source("= 1 1 1", env)


@pytest.mark.parametrize("source", ["> true 1", "> 1 true", "+ 1 true", "and true 1", "= false 0"])
def test_bool_number_mix_is_type_error(env, source):
    with pytest.raises(LinusRuntimeError) as exc_info:
        eval_source(source, env)
    assert type(exc_info.value) is LinusTypeError


@pytest.mark.parametrize(
    "source",
    ['+ "a" "b"', "+ none 1", "+ true true", "> true false", "and 1 2", "or 1 0", '= "a" "a"'],
)
def test_other_pairings_are_generic_runtime_errors(env, source):
    with pytest.raises(LinusRuntimeError) as exc_info:
        eval_source(source, env)
    assert type(exc_info.value) is LinusRuntimeError


@pytest.mark.parametrize("source", ["not 5", 'not "text"'])
def test_not_rejects_numbers_and_strings(env, source):
    with pytest.raises(LinusTypeError):
        eval_source(source, env)


def test_not_ignores_extra_operands(env):
    # the second operand is never evaluated
    assert eval_source("not true undefined_name", env) == Bool(False)


def test_operands_are_evaluated_eagerly(env):
    with pytest.raises(LinusNameError):
        eval_source("and false undefined_name", env)


def test_assignment_binds_and_yields_none(env):
    expr = Assignment(name="x", type_decl="num", expr=Literal(Token(T.NUM, 4.0)))
    assert evaluate(expr, env) is NONE
    assert env.retrieve("x") == Num(4.0)


def test_declared_type_is_not_checked(env):
    assert eval_source('def s: num -> "text"\n\ns', env) == Str('"text"')


def test_variable_lookup(env):
    env.define("y", Bool(True))
    assert evaluate(Variable(Token(T.SYMBOL, "y")), env) == Bool(True)


def test_assignment_then_use(env):
    assert eval_source("def x: num -> + 1 2\n\n+ x 10", env) == Num(13.0)


def test_unbound_variable(env):
    with pytest.raises(LinusNameError):
        eval_source("missing", env)


def test_failed_assignment_binds_nothing(env):
    with pytest.raises(LinusNameError):
        eval_source("def x: num -> + missing 1", env)
    assert "x" not in env


def test_unknown_function(env):
    with pytest.raises(LinusUndefinedFunctionError):
        eval_source("print 1 2", env)


def test_bare_operator_is_invalid_expression(env):
    with pytest.raises(LinusInvalidExpressionError):
        evaluate(Operator(Token(T.ADD)), env)


@pytest.mark.parametrize("op", [T.NOT, T.ADD, T.AND])
def test_call_without_operands(env, op):
    with pytest.raises(LinusArityError):
        evaluate(FunctionCall(Token(op), ()), env)


@pytest.mark.parametrize(
    "token,expected",
    [
        (Token(T.STR, '"q"'), Str('"q"')),
        (Token(T.NUM, 2.0), Num(2.0)),
        (Token(T.TRUE), Bool(True)),
        (Token(T.FALSE), Bool(False)),
        (Token(T.NONE), NONE),
        (Token(T.EOF), NONE),
        (Token(T.SYMBOL, "abc"), Str("abc")),
    ]
)
def test_literal_values(token, expected):
    assert literal_value(token) == expected


def test_non_literal_token():
    with pytest.raises(LinusInvalidExpressionError):
        literal_value(Token(T.INDENT))


def test_evaluator_creates_its_own_environment():
    evaluator = Evaluator()
    evaluator.evaluate(Assignment(name="a", type_decl="bool", expr=Literal(Token(T.TRUE))))
    assert evaluator.env.lookup("a") == Bool(True)


# -------------------------------
# Operator helpers
# -------------------------------

def test_ieee_division():
    assert divide(1.0, 0.0) == math.inf
    assert divide(-1.0, 0.0) == -math.inf
    assert math.isnan(divide(0.0, 0.0))


def test_apply_binary_dispatch():
    assert apply_binary(T.ADD, Num(1.0), Num(2.0)) == Num(3.0)
    assert apply_binary(T.OR, Bool(False), Bool(True)) == Bool(True)
    with pytest.raises(LinusTypeError, match="Cannot compare Bool and Num"):
        apply_binary(T.GREATER_THAN, Bool(True), Num(1.0))
    with pytest.raises(LinusTypeError, match="Cannot compare Num and Bool"):
        apply_binary(T.GREATER_THAN, Num(1.0), Bool(True))


def test_fold_single_value_is_returned_unchanged():
    assert fold(T.ADD, [Str('"s"')]) == Str('"s"')


def test_negate_function_value():
    with pytest.raises(LinusTypeError):
        negate(Function("f"))
