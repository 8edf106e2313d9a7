"""API endpoints for the BigInteger calculator."""

import asyncio

import structlog
from fastapi import APIRouter

from bigint.calculator import evaluate, format_result
from bigint.errors import BigIntegerDivisionByZero, BigIntegerOverflow
from bigint.models import ErrorResponse, EvaluateRequest, EvaluateResponse

logger = structlog.get_logger()

router = APIRouter()


@router.post(
    "/evaluate",
    responses={
        400: {"model": ErrorResponse, "description": "Division by zero"},
        422: {"description": "Invalid operands, or operand/result overflow"},
    },
)
async def evaluate_expression(request: EvaluateRequest) -> EvaluateResponse:
    """Evaluate a binary expression over two arbitrary-precision integers.

    Args:
        request: Operands as decimal strings and the operator token

    Returns:
        EvaluateResponse with the canonical result text

    Error Handling:
        - Malformed operands or unknown operator: 422 Validation Error (Pydantic)
        - Overflow: re-raised and mapped to 422 by the app's exception handler
        - Division by zero: re-raised and mapped to 400
    """
    logger.info(
        "received_expression",
        op=request.op,
        left_digits=len(request.left),
        right_digits=len(request.right),
    )

    try:
        # Run in executor so long divisions don't block the event loop
        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(
            None, evaluate, request.left, request.op, request.right
        )
    except (BigIntegerOverflow, BigIntegerDivisionByZero) as e:
        logger.warning("evaluation_failed", op=request.op, error=type(e).__name__)
        raise

    return EvaluateResponse(result=format_result(result))
