"""Exception handlers mapping domain errors to HTTP responses.

* EntityNotFoundError -> 404
* ConcurrencyError    -> 409
* any other DomainException (validation, stock, state) -> 400

Everything else is left to FastAPI and surfaces as a 500.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from myshop.domain.exceptions import (
    ConcurrencyError,
    DomainException,
    EntityNotFoundError,
)

logger = structlog.get_logger(__name__)


def _status_for(exc: DomainException) -> int:
    if isinstance(exc, EntityNotFoundError):
        return 404
    if isinstance(exc, ConcurrencyError):
        return 409
    return 400


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    status_code = _status_for(exc)
    logger.info(
        "Request rejected",
        method=request.method,
        path=request.url.path,
        status_code=status_code,
        error=str(exc),
    )
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)
