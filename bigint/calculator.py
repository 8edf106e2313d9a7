"""Binary expression evaluator over BigInteger operands.

Shared by the CLI and the HTTP API: both hand over `left op right` as text
and render the result with format_result().
"""

from __future__ import annotations

import operator
from collections.abc import Callable

import structlog

from bigint.big_integer import BigInteger
from bigint.errors import UnknownOperator

logger = structlog.get_logger()

ARITHMETIC_OPERATORS: dict[str, Callable[[BigInteger, BigInteger], BigInteger]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "%": operator.mod,
}

COMPARISON_OPERATORS: dict[str, Callable[[BigInteger, BigInteger], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}

OPERATORS: dict[str, Callable[[BigInteger, BigInteger], BigInteger | bool]] = {
    **ARITHMETIC_OPERATORS,
    **COMPARISON_OPERATORS,
}


def evaluate(left: str, op: str, right: str) -> BigInteger | bool:
    """Evaluate `left op right`.

    Args:
        left: Decimal text of the left operand
        op: Operator token (one of OPERATORS)
        right: Decimal text of the right operand

    Returns:
        BigInteger for arithmetic operators, bool for comparisons

    Raises:
        UnknownOperator: If op is not a supported token
        ValueError: If an operand is not a decimal integer literal
        BigIntegerOverflow: If an operand or the result exceeds the digit bound
        BigIntegerDivisionByZero: If `/` or `%` has a zero right operand
    """
    func = OPERATORS.get(op)
    if func is None:
        raise UnknownOperator(f"Unknown operator: {op!r}")

    result = func(BigInteger(left), BigInteger(right))
    logger.debug(
        "evaluated_expression",
        op=op,
        left_digits=len(left),
        right_digits=len(right),
    )
    return result


def parse_expression(line: str) -> tuple[str, str, str]:
    """Split a line of the form `a OP b` into its three tokens.

    Raises:
        ValueError: If the line does not have exactly three tokens
    """
    tokens = line.split()
    if len(tokens) != 3:
        raise ValueError(f"Expected 'a OP b', got {len(tokens)} token(s)")
    left, op, right = tokens
    return left, op, right


def format_result(result: BigInteger | bool) -> str:
    """Render an evaluation result as text."""
    if isinstance(result, bool):
        return "true" if result else "false"
    return str(result)
