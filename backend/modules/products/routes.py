"""
Product API endpoints.

Every route requires a bearer token. Each handler runs the same pipeline:
validate the body, call the service, then map the outcome to a response:

    validation failure -> 422 {"error": {field: [messages]}}
    missing product    -> 404 {"error": "Product not found"}
    storage/unexpected -> 500 {"error": "<operation-specific message>"}
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from api.dependencies import get_product_service
from api.middleware.auth import get_current_user
from api.responses import error_response, validation_error_response

from .interfaces import IProductService
from .models import Product
from .validation import validate_create, validate_stock, validate_update

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found"

router = APIRouter(dependencies=[Depends(get_current_user)])


def _not_found() -> Response:
    return error_response(status.HTTP_404_NOT_FOUND, PRODUCT_NOT_FOUND)


def _server_error(message: str, exc: Exception) -> Response:
    logger.error(f"{message}: {exc}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


@router.get("", response_model=list[Product])
async def list_products(
    service: IProductService = Depends(get_product_service),
):
    """List all products, ordered by id."""
    try:
        return await service.list_products()
    except Exception as e:
        return _server_error("Unable to fetch products", e)


@router.post("", response_model=Product, status_code=201)
async def create_product(
    payload: Any = Body(None),
    service: IProductService = Depends(get_product_service),
):
    """
    Create a product.

    name, description, price and stock are required; stock must be a
    non-negative integer and name at most 255 characters.
    """
    result = validate_create(payload)
    if not result.ok:
        return validation_error_response(result.errors)

    try:
        return await service.create_product(result.data)
    except Exception as e:
        return _server_error("Unable to create product", e)


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: int,
    service: IProductService = Depends(get_product_service),
):
    """Get a single product."""
    try:
        product = await service.get_product(product_id)
    except Exception as e:
        return _server_error("Unable to fetch product", e)

    if product is None:
        return _not_found()
    return product


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: int,
    payload: Any = Body(None),
    service: IProductService = Depends(get_product_service),
):
    """
    Partially update a product.

    Omitted fields keep their current value; sent fields follow the
    create rules.
    """
    result = validate_update(payload)
    if not result.ok:
        return validation_error_response(result.errors)

    try:
        product = await service.update_product(product_id, result.data)
    except Exception as e:
        return _server_error("Unable to update product", e)

    if product is None:
        return _not_found()
    return product


@router.delete("/{product_id}", status_code=204)
async def delete_product(
    product_id: int,
    service: IProductService = Depends(get_product_service),
):
    """Permanently delete a product."""
    try:
        deleted = await service.delete_product(product_id)
    except Exception as e:
        return _server_error("Unable to delete product", e)

    if not deleted:
        return _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{product_id}/stock", response_model=Product)
async def update_stock(
    product_id: int,
    payload: Any = Body(None),
    service: IProductService = Depends(get_product_service),
):
    """Set a product's stock level (non-negative integer)."""
    result = validate_stock(payload)
    if not result.ok:
        return validation_error_response(result.errors)

    try:
        product = await service.update_stock(product_id, result.data.stock)
    except Exception as e:
        return _server_error("Unable to update stock", e)

    if product is None:
        return _not_found()
    return product
