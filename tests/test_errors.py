"""
tests/test_errors.py — Tests for translating validation errors to responses.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api import register_exception_handlers
from models import FieldKey
from utils import MissingFieldException, InvalidInputException, ExistingProductException


@pytest.fixture
def client():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/missing")
    async def missing():
        raise MissingFieldException(FieldKey.USERNAME)

    @app.get("/invalid")
    async def invalid():
        raise InvalidInputException(FieldKey.PRODUCT_PRICE)

    @app.get("/existing")
    async def existing():
        raise ExistingProductException("Apple")

    return TestClient(app)


class TestExceptionHandlers:

    def test_missing_field(self, client):
        response = client.get("/missing")
        assert response.status_code == 400
        assert response.json() == {
            "error": "missing_field",
            "field": "username",
            "detail": "Missing required field: username",
        }

    def test_invalid_input(self, client):
        response = client.get("/invalid")
        assert response.status_code == 400
        assert response.json()["field"] == "product_price"
        assert response.json()["error"] == "invalid_input"

    def test_existing_product(self, client):
        response = client.get("/existing")
        assert response.status_code == 409
        assert response.json() == {
            "error": "existing_product",
            "field": None,
            "detail": "Product already exists: Apple",
        }
