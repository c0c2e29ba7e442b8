"""End-to-end tests for evaluate(expression, angle_mode)."""

import math

import pytest

from calculator import ExpressionEvaluator, EvaluationResult, evaluate, evaluate_or_raise, format_result
from core import AngleMode, ErrorKind, ErrorCategory, EvaluationError


def value(expr, mode="DEGREES"):
    result = evaluate(expr, mode)
    assert result.ok, f"{expr!r} failed with {result.error}"
    return result.value


def error(expr, mode="DEGREES"):
    result = evaluate(expr, mode)
    assert not result.ok, f"{expr!r} unexpectedly gave {result.value}"
    return result.error


# --- Arithmetic ---

@pytest.mark.parametrize("expr, expected", [
    ("2+3*4", 14),
    ("(2+3)*4", 20),
    ("2^3^2", 512),
    ("-5+3", -2),
    ("5*-3", -15),
    ("10 - 2 * 3 + 4 / 2", 6),
    ("((2 + 3) * (4 - 1))", 15),
    ("7 % 3", 1),
    ("-7 % 3", -1),
    ("2^-1", 0.5),
    ("-2^2", 4),
    ("5!", 120),
    ("3!!", 720),
    ("2*3!", 12),
    (".5 + .5", 1),
    ("0.1+0.2", 0.30000000000000004),
    ("1.2.3+1", 2.2),
    ("-(-3)", 3),
])
def test_arithmetic(expr, expected):
    assert value(expr) == pytest.approx(expected)


# --- Functions and constants ---

@pytest.mark.parametrize("expr, expected", [
    ("pow(2,10)", 1024),
    ("min(3,1,2)", 1),
    ("max(3,1,2)", 3),
    ("sqrt(16)+abs(-2)", 6),
    ("ln(e)", 1),
    ("log(1000)", 3),
    ("exp(0)", 1),
    ("floor(2.7)+ceil(2.1)+round(2.5)", 8),
    ("pow(2, max(1, 3))", 8),
    ("max(1,(2,3))", 3),
    ("PI", math.pi),
    ("2pi", None),
])
def test_functions(expr, expected):
    if expected is None:
        assert error(expr) == ErrorKind.INVALID_EXPRESSION
    else:
        assert value(expr) == pytest.approx(expected)


def test_sin_in_degrees():
    assert value("sin(90)", AngleMode.DEGREES) == pytest.approx(1.0)


def test_sin_in_radians():
    assert value("sin(pi/2)", AngleMode.RADIANS) == pytest.approx(1.0)


def test_asin_in_degrees():
    assert value("asin(1)", "deg") == pytest.approx(90.0)


# --- Errors ---

@pytest.mark.parametrize("expr, kind", [
    ("-1!", ErrorKind.NEGATIVE_FACTORIAL),
    ("2.5!", ErrorKind.NON_INTEGER_FACTORIAL),
    ("171!", ErrorKind.FACTORIAL_OVERFLOW),
    ("pow(2)", ErrorKind.ARITY_MISMATCH),
    ("sin(1,2)", ErrorKind.ARITY_MISMATCH),
    ("max()", ErrorKind.ZERO_ARGUMENT_FUNCTION_CALL),
    ("1/0", ErrorKind.NON_FINITE_RESULT),
    ("sqrt(-1)", ErrorKind.NON_FINITE_RESULT),
    ("sqrt(-1)+1", ErrorKind.INVALID_NUMBER),
    ("--3", ErrorKind.STACK_UNDERFLOW),
    ("(2+3", ErrorKind.MISMATCHED_PARENTHESES),
    ("2+3)", ErrorKind.MISMATCHED_PARENTHESES),
    ("2,3", ErrorKind.MISPLACED_COMMA),
    ("2 3", ErrorKind.INVALID_EXPRESSION),
    ("(2,3)", ErrorKind.INVALID_EXPRESSION),
    ("", ErrorKind.INVALID_EXPRESSION),
    ("2 $ 3", ErrorKind.UNKNOWN_TOKEN),
    ("x + 1", ErrorKind.UNKNOWN_IDENTIFIER),
    ("foo(1)", ErrorKind.UNSUPPORTED_FUNCTION),
    ("sin(2", ErrorKind.MISMATCHED_PARENTHESES),
    ("2+", ErrorKind.STACK_UNDERFLOW),
    ("+2", ErrorKind.STACK_UNDERFLOW),
    ("2*", ErrorKind.STACK_UNDERFLOW),
    ("2 + ( )", ErrorKind.STACK_UNDERFLOW),
])
def test_errors(expr, kind):
    assert error(expr) == kind


def test_error_categories():
    assert error("2 $ 3").category == ErrorCategory.LEXICAL
    assert error("(2+3").category == ErrorCategory.SYNTAX
    assert error("pow(2)").category == ErrorCategory.SEMANTIC
    assert error("1/0").category == ErrorCategory.ARITHMETIC
    assert error("2 3").category == ErrorCategory.STRUCTURAL


def test_every_error_kind_has_a_category():
    for kind in ErrorKind:
        assert isinstance(kind.category, ErrorCategory)


# --- Result object ---

def test_result_fields_on_success():
    result = evaluate("0.1+0.2", "rad")
    assert result == EvaluationResult("0.1+0.2", value=0.30000000000000004, angle_mode=AngleMode.RADIANS)
    assert result.formatted == "0.30000000000000004"
    assert result.message() is None


def test_result_fields_on_failure():
    result = evaluate("1/0")
    assert result.value is None
    assert result.formatted is None
    assert result.message("en").startswith("The result of this calculation was infinite")


def test_evaluate_or_raise():
    assert evaluate_or_raise("2+2") == 4
    with pytest.raises(EvaluationError) as exc_info:
        evaluate_or_raise("2+")
    assert exc_info.value.kind == ErrorKind.STACK_UNDERFLOW


def test_unknown_angle_mode_is_a_programming_error():
    with pytest.raises(ValueError):
        evaluate("1", "grad")


def test_default_angle_mode_is_degrees():
    assert ExpressionEvaluator().angle_mode == AngleMode.DEGREES
    assert evaluate("sin(90)").value == pytest.approx(1.0)


def test_call_angle_mode_overrides_instance_default():
    evaluator = ExpressionEvaluator(AngleMode.RADIANS)
    assert evaluator.evaluate("cos(180)", "deg").value == pytest.approx(-1.0)
    assert evaluator.evaluate("cos(pi)").value == pytest.approx(-1.0)


def test_idempotent():
    first = evaluate("sin(30)*2^3", "deg")
    assert all(evaluate("sin(30)*2^3", "deg") == first for _ in range(5))


def test_compile_returns_rpn():
    assert [str(t) for t in ExpressionEvaluator.compile("pow(2,3)")] == ["2", "3", "pow/2"]


def test_format_result():
    assert format_result(14.0) == "14"
