"""FastAPI application for the pool ledger.

Note: authentication of `sender` belongs to the wallet layer in front of this
service. The API trusts the sender it is given.
"""

import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from simpleswap.api.endpoints import router
from simpleswap.errors import LedgerError
from simpleswap.logging_config import configure_logging
from simpleswap.models import ErrorResponse

logger = structlog.get_logger()

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("SIMPLESWAP_HOST", "127.0.0.1")
PORT = int(os.environ.get("SIMPLESWAP_PORT", "8000"))
DEBUG = os.environ.get("SIMPLESWAP_DEBUG", "false").lower() in ("true", "1", "yes")

# Maximum request body size (1 MB)
MAX_REQUEST_SIZE = 1024 * 1024

app = FastAPI(
    title="SimpleSwap Ledger",
    description="Single-pair constant-product pool ledger",
    version="0.1.0",
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


@app.exception_handler(LedgerError)
async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    """Map ledger rejections to 400 with the error's stable code."""
    logger.warning(
        "ledger_rejected_request",
        path=request.url.path,
        code=exc.code,
        error=type(exc).__name__,
        detail=exc.message,
    )
    body = ErrorResponse(detail=exc.message, code=exc.code)
    return JSONResponse(status_code=400, content=body.model_dump())


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Run the ledger API server.

    Configuration via environment variables:
    - SIMPLESWAP_HOST: Host to bind to (default: 127.0.0.1)
    - SIMPLESWAP_PORT: Port to bind to (default: 8000)
    - SIMPLESWAP_DEBUG: Enable debug/reload mode (default: false)
    - SIMPLESWAP_LOG_LEVEL: Log level (default: INFO)
    """
    configure_logging()
    uvicorn.run(
        "simpleswap.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
