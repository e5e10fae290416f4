"""Domain error to HTTP response mapping."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from dikenang.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    OppositeVoteError,
    ServiceUnavailableError,
)

# Seconds a client should wait before retrying an unavailable operation
RETRY_AFTER_SECONDS = 5


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc), "resource": exc.resource},
    )


async def opposite_vote_handler(
    request: Request, exc: OppositeVoteError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": str(exc), "existing_kind": exc.existing_kind},
    )


async def business_rule_handler(
    request: Request, exc: BusinessRuleViolationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc)},
    )


async def service_unavailable_handler(
    request: Request, exc: ServiceUnavailableError
) -> JSONResponse:
    logfire.warn(
        "Request failed, store unavailable",
        path=request.url.path,
        operation=exc.operation,
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc)},
        headers={"Retry-After": str(RETRY_AFTER_SECONDS)},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register domain error handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(OppositeVoteError, opposite_vote_handler)
    app.add_exception_handler(BusinessRuleViolationError, business_rule_handler)
    app.add_exception_handler(ServiceUnavailableError, service_unavailable_handler)
