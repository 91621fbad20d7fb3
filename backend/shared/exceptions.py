"""
Base exception classes for the Product Catalog backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class CatalogError(Exception):
    """
    Base exception for all catalog errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logs and internal APIs."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class AuthenticationError(CatalogError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class StorageError(CatalogError):
    """
    The persistence layer could not complete an operation.

    Wraps connection, IO and query failures so callers never depend on
    the storage client's own exception types.
    """

    def __init__(
        self,
        message: str,
        operation: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code or "STORAGE_ERROR", details)
        self.operation = operation
        self.details["operation"] = operation
