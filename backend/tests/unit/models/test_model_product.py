"""Unit tests for :class:`catalog.models.product.Product`."""

from __future__ import annotations

from decimal import Decimal

import pytest
from catalog.models.product import Product

from tests.factories.product import ProductFactory


class TestProductModel:
    def test_persists_with_defaults(self, session):
        product = ProductFactory(images=["https://cdn.example.com/a.png"])
        assert product.id is not None
        assert product.is_active is True
        assert product.price == Decimal("19.99")
        assert product.images == ["https://cdn.example.com/a.png"]

    def test_name_is_trimmed(self, session):
        assert Product(name="  Lamp ", price=1, user_id=1).name == "Lamp"

    def test_rejects_negative_price(self):
        with pytest.raises(ValueError, match="greater than or equal to 0"):
            Product(name="Lamp", price=Decimal("-0.01"), user_id=1)

    def test_accepts_zero_price(self):
        assert Product(name="Freebie", price=0, user_id=1).price == Decimal("0")

    def test_rejects_non_string_images(self):
        with pytest.raises(ValueError, match="list of strings"):
            Product(name="Lamp", price=1, user_id=1, images=["ok", 3])
