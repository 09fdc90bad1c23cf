"""Tests for the syntax check that runs before tokenizing."""

import pytest

from Calculator import Validator
from Calculator import error as E


@pytest.mark.parametrize("expression", [
    "1",
    "-1",
    "1+2",
    "1 + ( 2.5 * 3 - ( 4 / 5.7 ) - 6.01 ) + 7",
    "-1+-2.1",
    "1.5/-2",
    "1*-2",
    "1(-2)",
    "2(3)",
    "(2)(3)",
    "1--1",
    "-(-1)",
    "-(2+3)*2",
    ".5+5.",
    "((((1))))",
    " 2 3 ",
])
def test_valid_expressions(expression):
    assert Validator.validate(expression) is True


@pytest.mark.parametrize("expression", [
    "",
    "   ",
    "1++1",
    "(()",
    "*5",
    "5*",
    "()",
    "(1",
    "1)",
    ")(",
    "(2)3",
    "--1",
    "1---1",
    "-",
    "(-)",
    "1(",
    ".",
    "1.2.3",
    "(*2)",
])
def test_malformed_expressions(expression):
    assert Validator.validate(expression) is False


@pytest.mark.parametrize("expression", ["1a", "2^3", "1,5", "x+1", "sin(1)", "1=1", "1%2"])
def test_unsupported_characters(expression):
    assert Validator.validate(expression) is False
    with pytest.raises(E.UnsupportedCharacterError):
        Validator.check_syntax(expression)


@pytest.mark.parametrize("expression, code", [
    ("", "3034"),
    ("(()", "3031"),
    ("*5", "3028"),
    ("5*", "3029"),
    ("(1", "3009"),
    ("1)", "3010"),
    ("(2)3", "3032"),
    ("1.2.3", "3008"),
    ("1(", "3027"),
])
def test_error_codes(expression, code):
    with pytest.raises(E.InvalidSyntaxError) as excinfo:
        Validator.check_syntax(expression)
    assert excinfo.value.code == code


def test_error_position_ignores_whitespace():
    with pytest.raises(E.InvalidSyntaxError) as excinfo:
        Validator.check_syntax("1 + + 1")
    assert excinfo.value.position == 2


def test_max_length():
    expression = "1" * 101
    assert Validator.validate(expression) is False
    assert Validator.validate(expression, max_length=101) is True
    assert Validator.validate("1" * 100) is True


def test_strip_whitespace():
    assert Validator.strip_whitespace(" 1 +\t2\n") == "1+2"
