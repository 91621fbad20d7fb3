"""
Global exception handlers.

- AuthenticationError -> 401 with the error message
- RequestValidationError (malformed JSON, bad path params) -> 422 with
  per-field messages, same shape as payload validation failures
- Anything else -> 500 with a fixed message; internal details are only logged
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError

from shared.exceptions import AuthenticationError, CatalogError
from shared.validation import format_errors

from .responses import error_response, validation_error_response

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_authentication_error_handler(app)
    _register_validation_error_handler(app)
    _register_catalog_error_handler(app)
    _register_generic_error_handler(app)


def _register_authentication_error_handler(app: FastAPI) -> None:

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        logger.debug(
            f"Rejected request to {request.url.path}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return error_response(
            status.HTTP_401_UNAUTHORIZED,
            exc.message,
            headers={"WWW-Authenticate": "Bearer"},
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.debug(f"Request validation error on {request.url.path}: {exc.errors()}")
        return validation_error_response(format_errors(exc.errors()))


def _register_catalog_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        logger.error(
            f"{exc.__class__.__name__} on {request.url.path}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
