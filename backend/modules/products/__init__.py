"""
Products module.

CRUD and stock management for the product catalog.

Public API:
- IProductService: Interface for product operations
- Product, ProductCreate, ProductUpdate, StockUpdate: Data models
- validate_create, validate_update, validate_stock: Payload validation
"""

from .interfaces import IProductService
from .models import Product, ProductCreate, ProductUpdate, StockUpdate
from .validation import validate_create, validate_update, validate_stock

__all__ = [
    # Interface
    "IProductService",
    # Models
    "Product",
    "ProductCreate",
    "ProductUpdate",
    "StockUpdate",
    # Validation
    "validate_create",
    "validate_update",
    "validate_stock",
]
