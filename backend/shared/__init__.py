"""
Shared infrastructure for the Product Catalog backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- observability: Root logger setup
- repository: Base repository with storage error translation

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    CatalogError,
    AuthenticationError,
    StorageError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "CatalogError",
    "AuthenticationError",
    "StorageError",
    "AuthenticatedUser",
]
