"""Arbitrary-precision signed decimal integers.

This module provides BigInteger, an immutable integer type backed by base
10,000 limbs with a hard cap on its size:
- Values needing more than MAX_DECIMAL_DIGITS decimal digits raise
  BigIntegerOverflow (at construction and after every arithmetic operation)
- Division and modulo by zero raise BigIntegerDivisionByZero
- Division truncates toward zero, so a remainder takes the dividend's sign

Usage pattern:
    from bigint import BigInteger

    a = BigInteger("-7")
    b = BigInteger(2)

    a / b       # BigInteger('-3')
    a % b       # BigInteger('-1')
    str(a * b)  # '-14'
"""

from __future__ import annotations

import re
from typing import TextIO

import structlog

from bigint.constants import MAX_DECIMAL_DIGITS, MAX_LIMBS, RADIX, RADIX_DIGITS
from bigint.errors import BigIntegerDivisionByZero, BigIntegerOverflow
from bigint.limbs import (
    add_magnitudes,
    compare_magnitudes,
    divide_magnitudes,
    is_zero,
    mul_magnitudes,
    normalize,
    sub_magnitudes,
)

__all__ = ["BigInteger", "read_big_integer", "write_big_integer"]

logger = structlog.get_logger()

# Optional sign followed by ASCII digits; an empty digit run parses as zero
_DECIMAL_RE = re.compile(r"-?[0-9]*")

# Smallest magnitude that needs more than MAX_LIMBS limbs
_INT_MAGNITUDE_LIMIT = RADIX**MAX_LIMBS


def _overflow(source: str, size: int) -> BigIntegerOverflow:
    """Log and build the overflow error.

    Args:
        source: What was too large ("literal", "int" or "result")
        size: Digit count for literals and results, bit length for ints
    """
    logger.debug("bigint_overflow", source=source, size=size, max_digits=MAX_DECIMAL_DIGITS)
    return BigIntegerOverflow(f"BigInteger overflow: value exceeds {MAX_DECIMAL_DIGITS} digits")


def _check_overflow(limb_count: int) -> None:
    """Raise BigIntegerOverflow if limb_count exceeds the digit bound."""
    if limb_count * RADIX_DIGITS > MAX_DECIMAL_DIGITS:
        raise _overflow("result", limb_count * RADIX_DIGITS)


class BigInteger:
    """Signed integer of up to MAX_DECIMAL_DIGITS decimal digits.

    Stored as a sign flag and a tuple of limbs in base RADIX, least
    significant first. Instances are always canonical: no most-significant
    zero limbs, and zero is never negative.

    Python ints mix freely on either side of every operator and comparison;
    they are converted to BigInteger first (and so are subject to the same
    overflow bound).

    Note that `//` is not supported. Division here truncates toward zero,
    which differs from Python's floor division for negative operands, so the
    operator is `/`.
    """

    __slots__ = ("_limbs", "_negative")
    _limbs: tuple[int, ...]
    _negative: bool

    def __init__(self, value: int | str | BigInteger = 0) -> None:
        """Create a BigInteger from an int, a decimal string, or a BigInteger.

        Args:
            value: Value to convert. Strings must match `-?[0-9]*`.

        Raises:
            BigIntegerOverflow: If the value exceeds MAX_DECIMAL_DIGITS digits
            ValueError: If a string contains anything besides a leading `-`
                and ASCII digits
            TypeError: If value is of any other type
        """
        if isinstance(value, BigInteger):
            self._limbs = value._limbs
            self._negative = value._negative
        elif isinstance(value, int):
            self._limbs, self._negative = self._parse_int(value)
        elif isinstance(value, str):
            self._limbs, self._negative = self._parse_str(value)
        else:
            raise TypeError(f"BigInteger requires int or str, got {type(value).__name__}")

    @staticmethod
    def _parse_int(value: int) -> tuple[tuple[int, ...], bool]:
        negative = value < 0
        magnitude = -value if negative else value
        if magnitude >= _INT_MAGNITUDE_LIMIT:
            raise _overflow("int", magnitude.bit_length())

        limbs: list[int] = []
        while magnitude > 0:
            magnitude, limb = divmod(magnitude, RADIX)
            limbs.append(limb)

        result = normalize(limbs, negative)
        _check_overflow(len(result[0]))
        return result

    @staticmethod
    def _parse_str(text: str) -> tuple[tuple[int, ...], bool]:
        negative = text.startswith("-")
        start = 1 if negative else 0
        # Reject oversized input before doing any parsing work
        if len(text) - start > MAX_DECIMAL_DIGITS:
            raise _overflow("literal", len(text) - start)

        if _DECIMAL_RE.fullmatch(text) is None:
            raise ValueError(f"Invalid decimal integer literal: {text[:40]!r}")

        limbs: list[int] = []
        end = len(text)
        while end > start:
            begin = max(start, end - RADIX_DIGITS)
            limbs.append(int(text[begin:end]))
            end = begin

        result = normalize(limbs, negative)
        _check_overflow(len(result[0]))
        return result

    @classmethod
    def _from_parts(cls, limbs: list[int], negative: bool) -> BigInteger:
        """Build a result from raw limbs: normalize, then guard the bound."""
        canonical, negative = normalize(limbs, negative)
        _check_overflow(len(canonical))
        result = cls.__new__(cls)
        result._limbs = canonical
        result._negative = negative
        return result

    @classmethod
    def from_str(cls, s: str) -> BigInteger:
        """Parse a BigInteger from its decimal text.

        Raises:
            ValueError: If the string is not a decimal integer literal
            BigIntegerOverflow: If it has more than MAX_DECIMAL_DIGITS digits
        """
        return cls(s)

    @classmethod
    def zero(cls) -> BigInteger:
        """Create a BigInteger with value 0."""
        return cls(0)

    @property
    def is_negative(self) -> bool:
        """True if the value is strictly negative."""
        return self._negative

    @property
    def limbs(self) -> tuple[int, ...]:
        """Base-RADIX limbs, least significant first."""
        return self._limbs

    # --- Conversion ---

    def __str__(self) -> str:
        parts = [str(self._limbs[-1])]
        parts.extend(f"{limb:0{RADIX_DIGITS}d}" for limb in reversed(self._limbs[:-1]))
        sign = "-" if self._negative else ""
        return sign + "".join(parts)

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"

    def __int__(self) -> int:
        """Convert to int (exact)."""
        # Built from limbs rather than str() to stay clear of int() digit limits
        result = 0
        for limb in reversed(self._limbs):
            result = result * RADIX + limb
        return -result if self._negative else result

    def __index__(self) -> int:
        return int(self)

    def __bool__(self) -> bool:
        """True if non-zero."""
        return not is_zero(self._limbs)

    def __hash__(self) -> int:
        return hash(int(self))

    # --- Comparison operations ---

    def _compare(self, other: BigInteger) -> int:
        if self._negative != other._negative:
            return -1 if self._negative else 1
        result = compare_magnitudes(self._limbs, other._limbs)
        return -result if self._negative else result

    def _compare_operand(self, other: object) -> int | None:
        """Compare against a BigInteger or int; None for unsupported types."""
        if isinstance(other, int) and abs(other) >= _INT_MAGNITUDE_LIMIT:
            # Out of range, so larger in magnitude than any BigInteger
            return -1 if other > 0 else 1
        other_big = _coerce(other)
        if other_big is None:
            return None
        return self._compare(other_big)

    def __eq__(self, other: object) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result == 0

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: object) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: object) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: object) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result >= 0

    # --- Unary operations ---

    def __neg__(self) -> BigInteger:
        """Negate the value. Zero stays non-negative."""
        return BigInteger._from_parts(list(self._limbs), not self._negative)

    def __pos__(self) -> BigInteger:
        """Unary positive (returns self)."""
        return self

    def __abs__(self) -> BigInteger:
        """Absolute value."""
        return -self if self._negative else self

    def increment(self) -> BigInteger:
        """Return self + 1."""
        return self._add(_ONE)

    def decrement(self) -> BigInteger:
        """Return self - 1."""
        return self._sub(_ONE)

    # --- Arithmetic operations ---

    def _add(self, other: BigInteger) -> BigInteger:
        if not other:
            return self
        if self._negative != other._negative:
            return self._sub(-other)
        return BigInteger._from_parts(add_magnitudes(self._limbs, other._limbs), self._negative)

    def _sub(self, other: BigInteger) -> BigInteger:
        if not other:
            return self
        if self._negative != other._negative:
            return self._add(-other)
        if compare_magnitudes(self._limbs, other._limbs) < 0:
            # |self| < |other|: compute |other| - |self| and flip the sign
            return BigInteger._from_parts(
                sub_magnitudes(other._limbs, self._limbs), not self._negative
            )
        return BigInteger._from_parts(sub_magnitudes(self._limbs, other._limbs), self._negative)

    def _mul(self, other: BigInteger) -> BigInteger:
        return BigInteger._from_parts(
            mul_magnitudes(self._limbs, other._limbs), self._negative != other._negative
        )

    def _div(self, other: BigInteger) -> BigInteger:
        if not other:
            logger.debug("bigint_division_by_zero", dividend_limbs=len(self._limbs))
            raise BigIntegerDivisionByZero("BigInteger division by zero")
        return BigInteger._from_parts(
            divide_magnitudes(self._limbs, other._limbs), self._negative != other._negative
        )

    def _mod(self, other: BigInteger) -> BigInteger:
        return self._sub(self._div(other)._mul(other))

    def __add__(self, other: BigInteger | int) -> BigInteger:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return self._add(other_big)

    def __radd__(self, other: int) -> BigInteger:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return other_big._add(self)

    def __sub__(self, other: BigInteger | int) -> BigInteger:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return self._sub(other_big)

    def __rsub__(self, other: int) -> BigInteger:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return other_big._sub(self)

    def __mul__(self, other: BigInteger | int) -> BigInteger:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return self._mul(other_big)

    def __rmul__(self, other: int) -> BigInteger:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return other_big._mul(self)

    def __truediv__(self, other: BigInteger | int) -> BigInteger:
        """Integer division, truncating toward zero.

        Raises:
            BigIntegerDivisionByZero: If other is zero
        """
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return self._div(other_big)

    def __rtruediv__(self, other: int) -> BigInteger:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return other_big._div(self)

    def __mod__(self, other: BigInteger | int) -> BigInteger:
        """Remainder of truncating division: self - (self / other) * other.

        The result is zero or has the sign of self.

        Raises:
            BigIntegerDivisionByZero: If other is zero
        """
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return self._mod(other_big)

    def __rmod__(self, other: int) -> BigInteger:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return other_big._mod(self)

    def __divmod__(self, other: BigInteger | int) -> tuple[BigInteger, BigInteger]:
        """Return (self / other, self % other) with truncating semantics."""
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        quotient = self._div(other_big)
        return quotient, self._sub(quotient._mul(other_big))

    def __rdivmod__(self, other: int) -> tuple[BigInteger, BigInteger]:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return divmod(other_big, self)


def _coerce(x: object) -> BigInteger | None:
    """Convert an int operand to BigInteger; None for unsupported types."""
    if isinstance(x, BigInteger):
        return x
    if isinstance(x, int):
        return BigInteger(x)
    return None


_ONE = BigInteger(1)


# --- Stream I/O ---


def read_big_integer(stream: TextIO) -> BigInteger:
    """Read one whitespace-delimited BigInteger from a text stream.

    Leading whitespace is skipped; the token ends at the next whitespace
    character or end of stream.

    Raises:
        EOFError: If the stream ends before any token
        ValueError: If the token is not a decimal integer literal
        BigIntegerOverflow: If the token has too many digits
    """
    ch = stream.read(1)
    while ch and ch.isspace():
        ch = stream.read(1)
    if not ch:
        raise EOFError("No BigInteger token before end of stream")

    chars: list[str] = []
    while ch and not ch.isspace():
        chars.append(ch)
        ch = stream.read(1)
    return BigInteger("".join(chars))


def write_big_integer(stream: TextIO, value: BigInteger) -> None:
    """Write the canonical decimal text of value to a text stream."""
    stream.write(str(value))
