"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating client failures into StorageError.
"""

import logging
from typing import Any, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _execute() which runs a query and wraps client errors

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class ProductRepository(BaseRepository[Product]):
            def get_by_id(self, product_id: int) -> Optional[Product]:
                query = self._db.table("products").select("*").eq("id", product_id)
                result = self._execute(query, "get_by_id")
                if not result.data:
                    return None
                return self._map_to_product(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, query: Any, operation: str) -> Any:
        """
        Execute a query builder and return the API response.

        Args:
            query: A PostgREST request builder (anything with .execute()).
            operation: Short name of the repository operation, for errors/logs.

        Raises:
            StorageError: If the database request fails for any reason.
        """
        try:
            return query.execute()
        except (APIError, httpx.HTTPError) as e:
            logger.error(
                f"Storage failure in {self.__class__.__name__}.{operation}: {e}",
                exc_info=True,
            )
            raise StorageError(
                f"Database operation failed: {operation}",
                operation=operation,
            ) from e
