"""
Todo API - Error Handling

Application error taxonomy and the single layer that maps errors to
HTTP responses. Every error body has the shape ``{"error": message}``.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api.validation import first_error_message

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised at startup when required configuration is missing."""


class AppError(Exception):
    """Base class for errors that are reported to the client."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Access denied"


class MissingTokenError(AuthError):
    message = "Access denied: No token provided"


class InvalidTokenError(AuthError):
    """Token could not be decoded, has a bad signature or bad claims."""

    status_code = status.HTTP_403_FORBIDDEN
    message = "Access denied: Invalid token"


class TokenExpiredError(InvalidTokenError):
    """Token was well-formed but its ``exp`` claim has passed."""


class InvalidCredentialsError(AuthError):
    message = "Invalid password"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class ConflictError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Email already in use"


class StoreError(AppError):
    """Unexpected failure of the relational store."""

    message = "Database error"


@contextmanager
def store_errors(message: str) -> Iterator[None]:
    """Translate store failures inside the block into ``StoreError(message)``."""
    try:
        yield
    except StoreError as exc:
        raise StoreError(message) from exc
    except SQLAlchemyError as exc:
        logger.error(f"Store failure: {exc}", exc_info=True)
        raise StoreError(message) from exc


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST, first_error_message(exc.errors())
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error-to-response mapping to the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
