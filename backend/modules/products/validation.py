"""
Per-operation request validation for products.

Each function returns a ValidationResult; nothing here raises for bad
input, and nothing here touches storage.
"""

from typing import Any

from shared.validation import ValidationResult, validate_payload
from .models import ProductCreate, ProductUpdate, StockUpdate


def validate_create(payload: Any) -> ValidationResult[ProductCreate]:
    """name, description, price and stock are all required."""
    return validate_payload(ProductCreate, payload)


def validate_update(payload: Any) -> ValidationResult[ProductUpdate]:
    """Nothing is required; sent fields follow the create rules."""
    return validate_payload(ProductUpdate, payload)


def validate_stock(payload: Any) -> ValidationResult[StockUpdate]:
    """stock is required and must be a non-negative integer."""
    return validate_payload(StockUpdate, payload)
