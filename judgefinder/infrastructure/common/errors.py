"""Map domain errors to HTTP responses."""

from typing import Any, Final, TypeVar

import structlog
from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette import status
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from judgefinder.domain.common.exceptions import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
    InvariantViolationError,
    ValidationError,
)
from judgefinder.domain.common.result import Err, Result

logger = structlog.get_logger(__name__)

T = TypeVar("T")

STATUS_BY_CODE: Final[dict[str, int]] = {
    DomainError.code: status.HTTP_400_BAD_REQUEST,
    ValidationError.code: status.HTTP_400_BAD_REQUEST,
    BusinessRuleViolationError.code: status.HTTP_409_CONFLICT,
    InvariantViolationError.code: status.HTTP_500_INTERNAL_SERVER_ERROR,
    EntityNotFoundError.code: status.HTTP_404_NOT_FOUND,
}


def status_for(error: DomainError) -> int:
    return STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST)


def unwrap_or_raise(result: Result[T, DomainError]) -> T:
    """
    Return the Ok value or raise the domain error for the exception handlers.

    Routers call this as the last step, so every Err becomes a response
    with the status from ``STATUS_BY_CODE``.
    """
    if isinstance(result, Err):
        raise result.error
    return result.value


def register_exception_handlers(app: FastAPI) -> None:
    """Register JSON error handlers, keeping FastAPI's ``detail`` key and adding ``code``."""

    @app.exception_handler(DomainError)
    async def _domain_error_handler(request: Request, exc: DomainError) -> Response:
        status_code = status_for(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("domain_invariant_violated", path=request.url.path, error=exc.message)
        payload: dict[str, Any] = {
            "detail": exc.message,
            "code": exc.code,
            "metadata": exc.metadata,
        }
        return JSONResponse(status_code=status_code, content=jsonable_encoder(payload))

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
        payload: dict[str, Any] = {
            "detail": exc.errors(),
            "code": "REQUEST_VALIDATION_ERROR",
        }
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=jsonable_encoder(payload),
        )

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception) -> Response:
        logger.exception("unhandled_exception", path=request.url.path, error=str(exc))
        payload: dict[str, Any] = {
            "detail": "An unexpected error occurred. Please try again later.",
            "code": "INTERNAL_ERROR",
        }
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload)
