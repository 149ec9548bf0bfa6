"""Mapping of service errors to HTTP responses."""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shortener.errors import (
    CodeSpaceExhausted,
    NotFound,
    StoreUnavailable,
    ValidationError,
)
from .schemas import ErrorResponse


def _error(status_code: int, error: str, detail: Optional[str] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, detail=detail).model_dump(),
    )


def register_exception_handlers(app: FastAPI, logger: logging.Logger) -> None:
    """Install handlers translating service errors into status codes."""

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        logger.warning(f"Invalid request body for {request.method} {request.url.path}: {exc.errors()}")
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    @app.exception_handler(ValidationError)
    async def invalid_url(request: Request, exc: ValidationError):
        logger.warning(f"URL validation failed: {exc}")
        return _error(status.HTTP_400_BAD_REQUEST, exc.message, detail=exc.field)

    @app.exception_handler(NotFound)
    async def not_found(request: Request, exc: NotFound):
        logger.warning(f"Short code not found: {exc.short_code}")
        return _error(status.HTTP_404_NOT_FOUND, "URL not found", detail=str(exc))

    @app.exception_handler(CodeSpaceExhausted)
    async def code_space_exhausted(request: Request, exc: CodeSpaceExhausted):
        logger.error(f"Failed to create short URL: {exc}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(StoreUnavailable)
    async def store_unavailable(request: Request, exc: StoreUnavailable):
        logger.error(f"Store unavailable during {request.method} {request.url.path}: {exc}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(Exception)
    async def unhandled(request: Request, exc: Exception):
        logger.error(
            f"Unhandled error during {request.method} {request.url.path}: {exc}",
            exc_info=exc,
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
