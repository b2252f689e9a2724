"""Mapping of domain errors to HTTP responses.

Routes let domain errors propagate; each error type maps to exactly one
status code here.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from threadify.domain.error import (
    BadRequestError,
    DomainError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotAuthorizedError,
    NotFoundError,
)

_STATUS_BY_ERROR: dict[type[DomainError], int] = {
    BadRequestError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    InvalidTokenError: status.HTTP_401_UNAUTHORIZED,
    NotAuthorizedError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error; unknown domain errors are 400."""
    for error_type, code in _STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    code = status_for(exc)
    headers = (
        {"WWW-Authenticate": "Bearer"} if isinstance(exc, InvalidTokenError) else None
    )

    logfire.info(
        "Request rejected",
        path=request.url.path,
        status_code=code,
        error_type=type(exc).__name__,
    )
    return JSONResponse(status_code=code, content={"detail": str(exc)}, headers=headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.exception(
        "Unhandled error", path=request.url.path, error_type=type(exc).__name__
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error and fallback handlers on ``app``."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
