"""Shared type definitions for calculator request/response models."""

import re
from typing import Annotated, Any, Literal

from pydantic import BeforeValidator, Field

_DECIMAL_INTEGER_RE = re.compile(r"-?[0-9]+")


def validate_decimal_integer(value: Any) -> str:
    """Validate that a value is a decimal integer string.

    Only the format is checked here; the digit bound is enforced when the
    string is converted to a BigInteger so that oversized operands surface
    as overflow errors rather than schema errors.

    Args:
        value: Value to validate (string or int)

    Returns:
        The value as a decimal string

    Raises:
        ValueError: If value is not an int or a string matching -?[0-9]+
    """
    # Accept int directly (bool is an int subclass but not a number here)
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)

    if not isinstance(value, str):
        raise ValueError(f"Decimal integer must be string or int, got {type(value).__name__}")

    if _DECIMAL_INTEGER_RE.fullmatch(value) is None:
        raise ValueError(f"Not a decimal integer string: '{value[:40]}'")

    return value


# Signed decimal integer as string (format-validated)
DecimalInteger = Annotated[
    str,
    BeforeValidator(validate_decimal_integer),
    Field(description="Signed decimal integer as string"),
]

# Any operator token the calculator accepts
Operator = Literal["+", "-", "*", "/", "%", "==", "!=", "<", "<=", ">", ">="]
