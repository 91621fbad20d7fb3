"""
Product service implementation.

Thin layer over ProductRepository: it owns logging of mutations and is the
seam the API layer (and tests) depend on through IProductService.
"""

import logging
from typing import Optional

from .interfaces import IProductService
from .models import Product, ProductCreate, ProductUpdate
from .repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService(IProductService):
    """Product service backed by a ProductRepository."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def list_products(self) -> list[Product]:
        return self._repository.list_all()

    async def create_product(self, data: ProductCreate) -> Product:
        product = self._repository.create(data.model_dump())
        logger.info(f"Created product {product.id}", extra={"product_id": product.id})
        return product

    async def get_product(self, product_id: int) -> Optional[Product]:
        return self._repository.get_by_id(product_id)

    async def update_product(
        self,
        product_id: int,
        data: ProductUpdate,
    ) -> Optional[Product]:
        changes = data.changes()
        product = self._repository.update(product_id, changes)
        if product is not None:
            logger.info(
                f"Updated product {product_id}: {', '.join(sorted(changes)) or 'no fields'}",
                extra={"product_id": product_id},
            )
        return product

    async def update_stock(self, product_id: int, stock: int) -> Optional[Product]:
        product = self._repository.update_stock(product_id, stock)
        if product is not None:
            logger.info(
                f"Set stock of product {product_id} to {stock}",
                extra={"product_id": product_id},
            )
        return product

    async def delete_product(self, product_id: int) -> bool:
        deleted = self._repository.delete(product_id)
        if deleted:
            logger.info(f"Deleted product {product_id}", extra={"product_id": product_id})
        return deleted
