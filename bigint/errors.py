"""Error classes for BigInteger arithmetic."""


class BigIntegerError(ArithmeticError):
    """Base class for BigInteger arithmetic errors."""

    pass


class BigIntegerOverflow(BigIntegerError, OverflowError):
    """Value needs more decimal digits than MAX_DECIMAL_DIGITS."""

    pass


class BigIntegerDivisionByZero(BigIntegerError, ZeroDivisionError):
    """Division or modulo by zero."""

    pass


class UnknownOperator(ValueError):
    """Calculator was given an operator token it does not support."""

    pass
