"""
Product repository for database access.

Encapsulates all Supabase queries and row mapping for the ``products``
table. Absence is reported through return values (None / False), never
through exceptions; only storage failures raise (StorageError).
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Product

PRODUCTS_TABLE = "products"


class ProductRepository(BaseRepository[Product]):
    """
    Repository for product data access.

    Every mutation is a single-row statement filtered by id, so concurrent
    writes to the same product are serialized by Postgres row locking.
    """

    def create(self, fields: dict[str, Any]) -> Product:
        """
        Insert a new product.

        Args:
            fields: Validated name, description, price and stock.

        Returns:
            The created Product with its database-assigned id.
        """
        now = _now()
        data = {**fields, "created_at": now, "updated_at": now}
        result = self._execute(self._db.table(PRODUCTS_TABLE).insert(data), "create")
        return self._map_to_product(result.data[0])

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get a product by ID, or None if it doesn't exist."""
        query = self._db.table(PRODUCTS_TABLE).select("*").eq("id", product_id)
        result = self._execute(query, "get_by_id")
        if not result.data:
            return None
        return self._map_to_product(result.data[0])

    def list_all(self) -> list[Product]:
        """List every product, ordered by id."""
        query = self._db.table(PRODUCTS_TABLE).select("*").order("id")
        result = self._execute(query, "list_all")
        return [self._map_to_product(row) for row in result.data]

    def update(self, product_id: int, changes: dict[str, Any]) -> Optional[Product]:
        """
        Apply a partial update.

        Only the keys present in ``changes`` are written; updated_at is
        always bumped.

        Returns:
            The updated Product, or None if no row has this id.
        """
        data = {**changes, "updated_at": _now()}
        return self._update_row(product_id, data, "update")

    def update_stock(self, product_id: int, stock: int) -> Optional[Product]:
        """Set the stock level. Returns None if no row has this id."""
        data = {"stock": stock, "updated_at": _now()}
        return self._update_row(product_id, data, "update_stock")

    def delete(self, product_id: int) -> bool:
        """
        Permanently delete a product.

        Returns:
            True if a row was deleted, False if no row had this id.
        """
        query = self._db.table(PRODUCTS_TABLE).delete().eq("id", product_id)
        result = self._execute(query, "delete")
        return bool(result.data)

    def _update_row(
        self, product_id: int, data: dict[str, Any], operation: str
    ) -> Optional[Product]:
        query = self._db.table(PRODUCTS_TABLE).update(data).eq("id", product_id)
        result = self._execute(query, operation)
        if not result.data:
            return None
        return self._map_to_product(result.data[0])

    def _map_to_product(self, data: dict[str, Any]) -> Product:
        """Map database row to Product model."""
        return Product(
            id=int(data["id"]),
            name=data["name"],
            description=data["description"],
            price=float(data["price"]),
            stock=int(data["stock"]),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()
