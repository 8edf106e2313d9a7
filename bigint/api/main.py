"""FastAPI application for the BigInteger calculator.

Arithmetic failures are mapped to JSON errors by exception handlers:
overflow is reported as 422 and division by zero as 400.
"""

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from bigint import __version__
from bigint.api.endpoints import router
from bigint.config import DEFAULT_API_CONFIG, ApiConfig
from bigint.constants import MAX_DECIMAL_DIGITS
from bigint.errors import BigIntegerDivisionByZero, BigIntegerOverflow

config = ApiConfig.from_env(DEFAULT_API_CONFIG)

app = FastAPI(
    title="BigInteger Calculator",
    description="Arbitrary-precision decimal integer arithmetic",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than config.max_request_size."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > config.max_request_size:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


@app.exception_handler(BigIntegerOverflow)
async def overflow_handler(request: Request, exc: BigIntegerOverflow) -> JSONResponse:
    """Operand or result exceeds the digit bound."""
    return JSONResponse(status_code=422, content={"detail": str(exc), "error": "overflow"})


@app.exception_handler(BigIntegerDivisionByZero)
async def division_by_zero_handler(
    request: Request, exc: BigIntegerDivisionByZero
) -> JSONResponse:
    """Division or modulo by zero."""
    return JSONResponse(status_code=400, content={"detail": str(exc), "error": "division_by_zero"})


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "max_decimal_digits": MAX_DECIMAL_DIGITS}


def run() -> None:
    """Run the calculator API server.

    Configuration via environment variables:
    - BIGINT_HOST: Host to bind to (default: 0.0.0.0)
    - BIGINT_PORT: Port to bind to (default: 8000)
    - BIGINT_DEBUG: Enable debug/reload mode (default: false)
    - BIGINT_MAX_REQUEST_SIZE: Request body limit in bytes (default: 1 MB)
    """
    uvicorn.run(
        "bigint.api.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
    )


if __name__ == "__main__":
    run()
