"""Interface layer error handling.

Maps domain errors to HTTP responses. Guest-facing token rejections all
share one neutral response so that probing tokens reveals nothing about
why a token failed.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from collab.domain.error import (
    AccessDeniedError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    RoleMismatchError,
    StorageError,
    ValidationError,
)

ACCESS_RESTRICTED_TITLE = "Access Restricted"
ACCESS_RESTRICTED_DETAIL = "This link has been revoked or expired"
ROLE_MISMATCH_DETAIL = "This link does not allow that action"


async def access_denied_handler(
    request: Request, exc: AccessDeniedError
) -> JSONResponse:
    logfire.warn("Guest access denied", reason=exc.reason, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"title": ACCESS_RESTRICTED_TITLE, "detail": ACCESS_RESTRICTED_DETAIL},
    )


async def role_mismatch_handler(
    request: Request, exc: RoleMismatchError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"title": ACCESS_RESTRICTED_TITLE, "detail": ROLE_MISMATCH_DETAIL},
    )


async def validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc), "field": exc.field},
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Report the first failing parameter like a domain ValidationError
    error = exc.errors()[0]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": error["msg"], "field": str(error["loc"][-1])},
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
    )


async def not_authorized_handler(
    request: Request, exc: NotAuthorizedError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN, content={"detail": str(exc)}
    )


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logfire.error("Storage error", error=str(exc), path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Storage temporarily unavailable, please retry"},
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logfire.warn("Unhandled domain error", error=str(exc), path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install domain error handlers on the application.

    Handlers are looked up along the exception's MRO, so the more specific
    ones take precedence over ``DomainError``.
    """
    app.add_exception_handler(AccessDeniedError, access_denied_handler)
    app.add_exception_handler(RoleMismatchError, role_mismatch_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(NotAuthorizedError, not_authorized_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(DomainError, domain_error_handler)
