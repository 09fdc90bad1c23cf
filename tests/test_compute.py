"""End-to-end tests for compute() / calculate()."""

import pytest

from Calculator import MathEngine
from Calculator import error as E


@pytest.mark.parametrize("expression, expected", [
    ("8-3-2", "3"),
    ("8/4/2", "1"),
    ("2+3*4", "14"),
    ("(2+3)*4", "20"),
    ("2(3)", "6"),
    ("(2)(3)", "6"),
    ("-1+-2.1", "-3.1"),
    ("1*-2", "-2"),
    ("1(-2)", "-2"),
    ("1.5/-2", "-0.75"),
    ("1--1", "2"),
    ("-(-1)", "1"),
    ("-(2+3)*2", "-10"),
    ("8/-(2)", "-4"),
    ("1/3", "0.3333"),
    ("2/3", "0.6667"),
    ("0.1+0.2", "0.3"),
    ("0/5", "0"),
    (".5+5.", "5.5"),
    ("1 + ( 2.5 * 3 - ( 4 / 5.7 ) - 6.01 ) + 7", "8.7882"),
])
def test_compute(expression, expected):
    assert MathEngine.compute(expression) == (True, expected)


@pytest.mark.parametrize("number, expected", [
    ("7", "7"),
    ("-7", "-7"),
    ("3.14159", "3.1416"),
    ("-12.34567", "-12.3457"),
    ("0.00004", "0"),
])
def test_single_number(number, expected):
    assert MathEngine.compute(number) == (True, expected)


@pytest.mark.parametrize("expression", ["1++1", "(()", "*5", "5*", "", "1a", "2^2", "--1", "(2)3"])
def test_invalid(expression):
    assert MathEngine.compute(expression) == (False, "")


@pytest.mark.parametrize("expression", ["5/0", "5/(1-1)", "1/-0"])
def test_division_by_zero_is_invalid(expression):
    assert MathEngine.compute(expression) == (False, "")


def test_compute_is_idempotent():
    expression = "1 + ( 2.5 * 3 - ( 4 / 5.7 ) - 6.01 ) + 7"
    assert MathEngine.compute(expression) == MathEngine.compute(expression)


def test_decimal_places():
    assert MathEngine.compute("1/3", decimal_places=2) == (True, "0.33")
    assert MathEngine.compute("2/3", decimal_places=0) == (True, "1")


def test_max_length():
    assert MathEngine.compute("1+" * 50 + "1") == (False, "")
    assert MathEngine.compute("1+" * 50 + "1", max_length=101) == (True, "51")


def test_calculate_attaches_equation():
    with pytest.raises(E.DivisionByZeroError) as excinfo:
        MathEngine.calculate("5/0")
    assert excinfo.value.code == "3003"
    assert excinfo.value.equation == "5/0"


def test_calculate_reports_syntax_errors():
    with pytest.raises(E.InvalidSyntaxError) as excinfo:
        MathEngine.calculate("1++1")
    assert excinfo.value.code == "3028"
    assert excinfo.value.equation == "1++1"


def test_debug_output(capsys, monkeypatch):
    monkeypatch.setattr(MathEngine, "debug", True)
    MathEngine.compute("1+2")
    assert "Final AST:" in capsys.readouterr().out


def test_no_output_without_debug(capsys):
    MathEngine.compute("1+2")
    assert capsys.readouterr().out == ""


def test_deep_nesting_is_invalid_not_a_crash():
    expression = "-(" * 400 + "1" + ")" * 400
    assert MathEngine.compute(expression, max_length=2000) == (False, "")
    with pytest.raises(E.CalculationError) as excinfo:
        MathEngine.calculate(expression, max_length=2000)
    assert excinfo.value.code == "3036"
    assert excinfo.value.equation == expression


def test_moderate_nesting_still_evaluates():
    expression = "-(" * 50 + "1" + ")" * 50
    assert MathEngine.compute(expression, max_length=200) == (True, "1")
