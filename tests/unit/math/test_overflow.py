"""Tests for the BigInteger digit bound."""

import pytest

from bigint import MAX_DECIMAL_DIGITS, BigInteger, BigIntegerOverflow
from tests.helpers import MAX_DIGIT_LITERAL, OVER_MAX_DIGIT_LITERAL


class TestConstructionBound:
    """Overflow checks at construction time."""

    def test_max_digits_string_accepted(self):
        """A value with exactly MAX_DECIMAL_DIGITS digits is representable."""
        b = BigInteger(MAX_DIGIT_LITERAL)
        assert len(str(b)) == MAX_DECIMAL_DIGITS

    def test_max_digits_negative_string_accepted(self):
        """The sign does not count toward the bound."""
        b = BigInteger("-" + MAX_DIGIT_LITERAL)
        assert b.is_negative
        assert len(str(b)) == MAX_DECIMAL_DIGITS + 1

    def test_one_digit_over_raises(self):
        with pytest.raises(BigIntegerOverflow):
            BigInteger(OVER_MAX_DIGIT_LITERAL)
        with pytest.raises(BigIntegerOverflow):
            BigInteger("-" + OVER_MAX_DIGIT_LITERAL)

    def test_length_checked_before_parsing(self):
        """Oversized input is rejected as overflow even if it is not numeric."""
        with pytest.raises(BigIntegerOverflow):
            BigInteger("x" * (MAX_DECIMAL_DIGITS + 1))

    def test_leading_zeros_count_toward_length(self):
        """The pre-check counts glyphs, not significant digits."""
        with pytest.raises(BigIntegerOverflow):
            BigInteger("0" * MAX_DECIMAL_DIGITS + "1")

    def test_int_at_bound_accepted(self):
        assert BigInteger(10**MAX_DECIMAL_DIGITS - 1) == BigInteger(MAX_DIGIT_LITERAL)

    def test_int_over_bound_raises(self):
        with pytest.raises(BigIntegerOverflow):
            BigInteger(10**MAX_DECIMAL_DIGITS)
        with pytest.raises(BigIntegerOverflow):
            BigInteger(-(10**MAX_DECIMAL_DIGITS))

    def test_overflow_is_overflow_error(self):
        """Callers catching the builtin error also catch ours."""
        with pytest.raises(OverflowError):
            BigInteger(OVER_MAX_DIGIT_LITERAL)
        with pytest.raises(ArithmeticError):
            BigInteger(OVER_MAX_DIGIT_LITERAL)

    def test_error_message(self):
        with pytest.raises(BigIntegerOverflow) as exc_info:
            BigInteger(OVER_MAX_DIGIT_LITERAL)
        assert str(MAX_DECIMAL_DIGITS) in str(exc_info.value)


class TestOperationBound:
    """Overflow checks on arithmetic results."""

    def test_add_past_bound_raises(self):
        with pytest.raises(BigIntegerOverflow):
            BigInteger(MAX_DIGIT_LITERAL) + 1

    def test_sub_past_bound_raises(self):
        with pytest.raises(BigIntegerOverflow):
            BigInteger("-" + MAX_DIGIT_LITERAL) - 1

    def test_add_within_bound(self):
        """Cancelling operations near the bound are fine."""
        big = BigInteger(MAX_DIGIT_LITERAL)
        assert big - big == 0
        assert big + (-big) == 0
        assert big.decrement() + 1 == big

    def test_increment_past_bound_raises(self):
        with pytest.raises(BigIntegerOverflow):
            BigInteger(MAX_DIGIT_LITERAL).increment()

    def test_mul_reaching_bound(self):
        """10**20000 * 10**9999 has exactly MAX_DECIMAL_DIGITS digits."""
        a = BigInteger("1" + "0" * 20000)
        b = BigInteger("1" + "0" * 9999)
        assert len(str(a * b)) == MAX_DECIMAL_DIGITS

    def test_mul_past_bound_raises(self):
        """Multiplying two large values past the bound raises."""
        a = BigInteger("1" + "0" * 20000)
        b = BigInteger("1" + "0" * 15000)
        with pytest.raises(BigIntegerOverflow):
            a * b

    def test_mul_by_ten_past_bound_raises(self):
        with pytest.raises(BigIntegerOverflow):
            BigInteger("1" + "0" * (MAX_DECIMAL_DIGITS - 1)) * 10

    def test_mixed_int_operand_over_bound(self):
        """An int operand beyond the bound fails on conversion."""
        with pytest.raises(BigIntegerOverflow):
            BigInteger(1) + 10**MAX_DECIMAL_DIGITS

    def test_div_of_max_value(self):
        """Division never grows a value; the max value divides cleanly."""
        big = BigInteger(MAX_DIGIT_LITERAL)
        assert big / big == 1
        assert big % big == 0
        assert str(big / 9) == "1" * MAX_DECIMAL_DIGITS

    def test_failed_operation_leaves_operands_intact(self):
        big = BigInteger(MAX_DIGIT_LITERAL)
        with pytest.raises(BigIntegerOverflow):
            big + big
        assert str(big) == MAX_DIGIT_LITERAL
