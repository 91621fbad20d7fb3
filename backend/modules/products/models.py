"""
Products module data models.

Product is the stored/serialized record. The *Create / *Update models
describe what clients may send and carry the field rules used by
validation.py.
"""

from datetime import datetime
from typing import Annotated, Any
from pydantic import BaseModel, BeforeValidator, Field
from pydantic_core import PydanticCustomError

NAME_MAX_LENGTH = 255


def _reject_bool(value: Any) -> Any:
    # bool is an int subclass, so lax float parsing would take true as 1.0
    if isinstance(value, bool):
        raise PydanticCustomError("float_type", "Input should be a valid number")
    return value


Price = Annotated[float, BeforeValidator(_reject_bool)]


class Product(BaseModel):
    """A persisted product."""

    id: int = Field(..., description="System-assigned identifier")
    name: str = Field(..., description="Product name")
    description: str = Field(..., description="Product description")
    price: float = Field(..., description="Unit price")
    stock: int = Field(..., ge=0, description="Units in stock")
    created_at: datetime = Field(..., description="Creation time")
    updated_at: datetime = Field(..., description="Last modification time")


class ProductCreate(BaseModel):
    """Fields accepted when creating a product. All are required."""

    model_config = {"extra": "ignore", "str_strip_whitespace": True}

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    description: str = Field(..., min_length=1)
    price: Price = Field(..., allow_inf_nan=False)
    stock: int = Field(..., ge=0)


class ProductUpdate(BaseModel):
    """
    Fields accepted on partial update.

    Every field is optional, but a field that is sent must satisfy the
    same rule as on create; an explicit null is rejected. The None
    defaults are never validated, only sent values are.
    """

    model_config = {"extra": "ignore", "str_strip_whitespace": True}

    name: str = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    description: str = Field(None, min_length=1)
    price: Price = Field(None, allow_inf_nan=False)
    stock: int = Field(None, ge=0)

    def changes(self) -> dict[str, Any]:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class StockUpdate(BaseModel):
    """Body of a stock update."""

    model_config = {"extra": "ignore"}

    stock: int = Field(..., ge=0)
