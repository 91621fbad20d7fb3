"""
Products module interface.

The API layer depends on IProductService for all product operations.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Product, ProductCreate, ProductUpdate


@runtime_checkable
class IProductService(Protocol):
    """
    Interface for product operations.

    Inputs are already validated. A missing product is reported as
    None (or False for delete); storage failures raise StorageError.
    """

    async def list_products(self) -> list[Product]:
        """List all products in id order."""
        ...

    async def create_product(self, data: ProductCreate) -> Product:
        """Create a product and return the stored record."""
        ...

    async def get_product(self, product_id: int) -> Optional[Product]:
        """Get a product by ID, None if absent."""
        ...

    async def update_product(
        self,
        product_id: int,
        data: ProductUpdate,
    ) -> Optional[Product]:
        """Apply a partial update, None if absent."""
        ...

    async def update_stock(self, product_id: int, stock: int) -> Optional[Product]:
        """Set the stock level, None if absent."""
        ...

    async def delete_product(self, product_id: int) -> bool:
        """Delete a product. Returns False if it didn't exist."""
        ...
