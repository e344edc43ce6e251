"""
Shared fixtures for the validation tests.
"""

import pytest

from config import Settings
from models import Product
from services import InMemoryInventory
from utils import Validation


@pytest.fixture
def settings():
    """Settings with the lowest bcrypt cost so hashing stays fast."""
    return Settings(BCRYPT_ROUNDS=4, PASSWORD_CREATE_PATTERN=True)


@pytest.fixture
def inventory():
    """Inventory holding a single product named 'Apple'."""
    return InMemoryInventory([
        Product(
            name="Apple",
            is_available=True,
            ripening_date="01-09-2026",
            season="Autumn",
            stock=12,
            price=1.25,
        )
    ])


@pytest.fixture
def validator(settings, inventory):
    return Validation(settings=settings, inventory=inventory)
