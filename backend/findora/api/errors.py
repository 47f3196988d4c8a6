"""
Exception handlers — turn application errors into JSON responses.

Body shape for every failure: ``{"message": ...}``, plus ``"errors"`` with
``formErrors`` / ``fieldErrors`` when the input was at fault.
"""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from findora.core.errors import AppError, InvalidInputError, flatten_errors
from findora.core.logging import get_logger

logger = get_logger(__name__)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_body(), headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = InvalidInputError(errors=flatten_errors(exc.errors()))
    logger.info(
        "Request rejected by validation",
        path=request.url.path,
        fields=sorted(error.errors["fieldErrors"]),
    )
    return JSONResponse(status_code=error.status_code, content=error.to_body())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path, method=request.method)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
