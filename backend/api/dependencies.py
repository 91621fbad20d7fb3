"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Routes only ever receive services through Depends(); tests replace them
with app.dependency_overrides.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.products.interfaces import IProductService
    from modules.products.repository import ProductRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._auth_service: "IAuthService | None" = None
        self._product_service: "IProductService | None" = None
        self._product_repository: "ProductRepository | None" = None

    @property
    def auth(self) -> "IAuthService":
        """
        Get the auth service instance.

        The identity repository is resolved lazily by the service, so
        token validation works without a database connection.
        """
        if self._auth_service is None:
            from modules.auth.service import AuthService
            from shared.config import get_settings
            self._auth_service = AuthService(settings=get_settings())
        return self._auth_service

    @property
    def product_repository(self) -> "ProductRepository":
        """Get the product repository instance."""
        if self._product_repository is None:
            from modules.products.repository import ProductRepository
            from shared.database import get_supabase_client
            self._product_repository = ProductRepository(get_supabase_client())
        return self._product_repository

    @property
    def products(self) -> "IProductService":
        """Get the product service instance."""
        if self._product_service is None:
            from modules.products.service import ProductService
            self._product_service = ProductService(repository=self.product_repository)
        return self._product_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._auth_service = None
        self._product_service = None
        self._product_repository = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_product_service() -> "IProductService":
    """FastAPI dependency for product service."""
    return get_container().products
