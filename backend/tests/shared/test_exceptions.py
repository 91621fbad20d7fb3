"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    CatalogError,
    AuthenticationError,
    StorageError,
)


class TestCatalogError:
    def test_catalog_error_message(self):
        """CatalogError should store message."""
        error = CatalogError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_catalog_error_default_code(self):
        """CatalogError should default code to class name."""
        assert CatalogError("Test error").code == "CatalogError"

    def test_catalog_error_custom_code(self):
        assert CatalogError("Test error", code="CUSTOM_ERROR").code == "CUSTOM_ERROR"

    def test_catalog_error_default_details(self):
        assert CatalogError("Test error").details == {}

    def test_catalog_error_to_dict(self):
        """CatalogError should convert to dict."""
        error = CatalogError("Test error", code="TEST_ERROR", details={"key": "value"})
        assert error.to_dict() == {
            "error": "TEST_ERROR",
            "message": "Test error",
            "details": {"key": "value"},
        }


class TestAuthenticationError:
    def test_inherits_catalog_error(self):
        error = AuthenticationError("Token not provided")
        assert isinstance(error, CatalogError)
        assert error.code == "AuthenticationError"


class TestStorageError:
    def test_storage_error_records_operation(self):
        """StorageError should keep the failed operation name."""
        error = StorageError("Database operation failed: create", operation="create")
        assert error.operation == "create"
        assert error.details == {"operation": "create"}
        assert error.code == "STORAGE_ERROR"
        assert isinstance(error, CatalogError)

    def test_storage_error_merges_details(self):
        error = StorageError("failed", operation="delete", details={"product_id": 3})
        assert error.details == {"product_id": 3, "operation": "delete"}
