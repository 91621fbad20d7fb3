"""
Error response helpers.

Every error the API returns has the shape ``{"error": ...}`` where the
value is either a message string or a field -> messages mapping.
"""

from typing import Union

from fastapi.responses import JSONResponse

ErrorBody = Union[str, dict[str, list[str]]]


def error_response(
    status_code: int,
    error: ErrorBody,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a JSON error response."""
    return JSONResponse(status_code=status_code, content={"error": error}, headers=headers)


def validation_error_response(errors: dict[str, list[str]]) -> JSONResponse:
    """422 response carrying per-field validation messages."""
    return error_response(422, errors)
