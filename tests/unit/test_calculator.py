"""Tests for the binary expression evaluator."""

import pytest

from bigint import BigInteger, BigIntegerDivisionByZero, BigIntegerOverflow
from bigint.calculator import OPERATORS, evaluate, format_result, parse_expression
from bigint.errors import UnknownOperator
from tests.helpers import MAX_DIGIT_LITERAL


class TestEvaluate:
    """Tests for evaluate()."""

    @pytest.mark.parametrize(
        "left,op,right,expected",
        [
            ("123", "+", "877", "1000"),
            ("1000", "-", "1", "999"),
            ("99999999", "*", "99999999", "9999999800000001"),
            ("-7", "/", "2", "-3"),
            ("-7", "%", "2", "-1"),
        ],
    )
    def test_arithmetic(self, left, op, right, expected):
        result = evaluate(left, op, right)
        assert isinstance(result, BigInteger)
        assert str(result) == expected

    @pytest.mark.parametrize(
        "op,expected",
        [("==", False), ("!=", True), ("<", True), ("<=", True), (">", False), (">=", False)],
    )
    def test_comparison(self, op, expected):
        assert evaluate("-10000", op, "9999") is expected

    def test_all_operators_registered(self):
        assert set(OPERATORS) == {"+", "-", "*", "/", "%", "==", "!=", "<", "<=", ">", ">="}

    def test_unknown_operator(self):
        with pytest.raises(UnknownOperator):
            evaluate("1", "**", "2")

    def test_unknown_operator_is_value_error(self):
        with pytest.raises(ValueError):
            evaluate("1", "//", "2")

    def test_invalid_operand(self):
        with pytest.raises(ValueError):
            evaluate("1.5", "+", "2")

    def test_division_by_zero_propagates(self):
        with pytest.raises(BigIntegerDivisionByZero):
            evaluate("5", "%", "0")

    def test_overflow_propagates(self):
        with pytest.raises(BigIntegerOverflow):
            evaluate(MAX_DIGIT_LITERAL, "+", "1")


class TestParseExpression:
    """Tests for parse_expression()."""

    def test_splits_on_whitespace(self):
        assert parse_expression("  -12   *\t34\n") == ("-12", "*", "34")

    @pytest.mark.parametrize("line", ["", "1 +", "1 + 2 + 3", "1+2"])
    def test_malformed(self, line):
        with pytest.raises(ValueError):
            parse_expression(line)


class TestFormatResult:
    """Tests for format_result()."""

    def test_bool(self):
        assert format_result(True) == "true"
        assert format_result(False) == "false"

    def test_big_integer(self):
        assert format_result(BigInteger(-100000001)) == "-100000001"
