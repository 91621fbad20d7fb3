"""
Product Catalog API package.

Provides the FastAPI application for the product catalog service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
