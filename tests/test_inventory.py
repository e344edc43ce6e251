"""
tests/test_inventory.py — Tests for the in-memory inventory lookup.
"""

import pytest

from models import ProductCandidate
from services import InMemoryInventory
from utils import ExistingProductException


class TestInMemoryInventory:

    def test_find_existing(self, inventory):
        product = inventory.find_product_by_name("Apple")
        assert product is not None
        assert product.season == "Autumn"

    def test_find_is_exact(self, inventory):
        assert inventory.find_product_by_name("apple") is None
        assert inventory.find_product_by_name("Banana") is None

    def test_add_product(self):
        inventory = InMemoryInventory()
        product = inventory.add_product(ProductCandidate(
            name="Cherry",
            is_available=True,
            ripening_date="01-06-2026",
            season="Summer",
            stock=40,
            price=4.99,
        ))
        assert len(product.id) == 36
        assert inventory.find_product_by_name("Cherry") == product
        assert inventory.list_products() == [product]
        assert len(inventory) == 1

    def test_validated_then_added(self, validator, inventory):
        candidate = ProductCandidate(
            name="Plum",
            ripening_date="20-09-2026",
            season="Autumn",
            stock=0,
            price=0.99,
        )
        validator.validate_product_candidate(candidate)
        inventory.add_product(candidate)
        assert [p.name for p in inventory.list_products()] == ["Apple", "Plum"]

    def test_add_existing_name_refused(self, inventory):
        original = inventory.find_product_by_name("Apple")
        with pytest.raises(ExistingProductException) as exc_info:
            inventory.add_product(ProductCandidate(
                name="Apple",
                ripening_date="02-09-2026",
                season="Autumn",
                stock=1,
                price=9.99,
            ))
        assert exc_info.value.name == "Apple"
        assert inventory.find_product_by_name("Apple") is original
        assert len(inventory) == 1
