"""Arbitrary-precision signed decimal integers."""

from bigint.big_integer import BigInteger, read_big_integer, write_big_integer
from bigint.constants import MAX_DECIMAL_DIGITS, RADIX, RADIX_DIGITS
from bigint.errors import BigIntegerDivisionByZero, BigIntegerError, BigIntegerOverflow

__version__ = "0.1.0"
__all__ = [
    "BigInteger",
    "BigIntegerError",
    "BigIntegerOverflow",
    "BigIntegerDivisionByZero",
    "read_big_integer",
    "write_big_integer",
    "MAX_DECIMAL_DIGITS",
    "RADIX",
    "RADIX_DIGITS",
    "__version__",
]
