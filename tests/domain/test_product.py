"""Unit tests for the Product value record."""

import dataclasses

import pytest

from store.domain.exceptions import ValidationError
from store.domain.model.product import Product
from store.domain.model.value_objects import Money


class TestProduct:

    def test_happy_path(self):
        p = Product(id="1", name="iPhone 15", price=Money.of("999.99"))
        assert p.name == "iPhone 15"
        assert p.price == Money.of("999.99")

    def test_is_immutable(self):
        p = Product(id="1", name="iPhone 15", price=Money.of("999.99"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.price = Money.of("1.00")  # type: ignore[misc]

    def test_free_product_allowed(self):
        assert Product("1", "Sticker", Money.of("0")).price == Money.zero()

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product(id="1", name="  ", price=Money.of("1"))

    def test_blank_id_rejected(self):
        with pytest.raises(ValidationError, match="ID is required"):
            Product(id="", name="Widget", price=Money.of("1"))

    def test_raw_number_price_rejected(self):
        with pytest.raises(ValidationError, match="must be Money"):
            Product(id="1", name="Widget", price=10)  # type: ignore[arg-type]
