"""Pydantic models for the calculator API."""

from bigint.models.expression import ErrorResponse, EvaluateRequest, EvaluateResponse
from bigint.models.types import DecimalInteger, Operator, validate_decimal_integer

__all__ = [
    "DecimalInteger",
    "Operator",
    "validate_decimal_integer",
    "EvaluateRequest",
    "EvaluateResponse",
    "ErrorResponse",
]
