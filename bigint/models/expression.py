"""Pydantic models for calculator requests and responses."""

from typing import Literal

from pydantic import BaseModel, Field

from bigint.models.types import DecimalInteger, Operator


class EvaluateRequest(BaseModel):
    """A binary expression `left op right`."""

    left: DecimalInteger = Field(description="Left operand")
    op: Operator = Field(description="Operator token")
    right: DecimalInteger = Field(description="Right operand")


class EvaluateResponse(BaseModel):
    """Result of evaluating an expression.

    Arithmetic results are canonical decimal strings; comparisons give
    "true" or "false".
    """

    result: str


class ErrorResponse(BaseModel):
    """Arithmetic failure reported by the API."""

    detail: str
    error: Literal["overflow", "division_by_zero"]
