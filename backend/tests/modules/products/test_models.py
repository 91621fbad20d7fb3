import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from modules.products.models import Product, ProductUpdate


class TestProduct:
    def test_stock_cannot_be_negative(self):
        now = datetime.now(timezone.utc)
        with pytest.raises(ValidationError):
            Product(
                id=1,
                name="Widget",
                description="A widget",
                price=1.0,
                stock=-1,
                created_at=now,
                updated_at=now,
            )

    def test_serializes_id_as_integer(self):
        now = datetime.now(timezone.utc)
        product = Product(
            id="3",
            name="Widget",
            description="A widget",
            price="9.99",
            stock=1,
            created_at=now,
            updated_at=now,
        )
        data = product.model_dump(mode="json")
        assert data["id"] == 3
        assert data["price"] == 9.99


class TestProductUpdate:
    def test_changes_excludes_unsent_fields(self):
        update = ProductUpdate.model_validate({"name": "Gadget", "color": "red"})
        assert update.changes() == {"name": "Gadget"}
