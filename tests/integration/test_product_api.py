"""Integration tests for the Product endpoints.

Covers:
- POST /products success and validation failures.
- GET /products/{id} look-up and 404.
"""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.integration


class TestCreateProduct:
    def test_create_returns_product_id(self, api_client):
        response = api_client.post(
            "/products",
            {"name": "Widget", "price": "9.99", "quantity_in_stock": 10},
            format="json",
        )
        assert response.status_code == 200
        product = Product.objects.get(id=response.json()["product_id"])
        assert product.name == "Widget"
        assert product.price == Decimal("9.99")
        assert product.quantity_in_stock == 10

    def test_create_accepts_numeric_price(self, api_client):
        response = api_client.post(
            "/products",
            {"name": "Widget", "price": 12.5, "quantity_in_stock": 0},
            format="json",
        )
        assert response.status_code == 200
        product = Product.objects.get(id=response.json()["product_id"])
        assert product.price == Decimal("12.50")

    def test_create_with_category(self, api_client, category):
        response = api_client.post(
            "/products",
            {
                "name": "Monitor",
                "price": "1299.90",
                "quantity_in_stock": 2,
                "category_id": str(category.id),
            },
            format="json",
        )
        assert response.status_code == 200
        product = Product.objects.get(id=response.json()["product_id"])
        assert product.category_id == category.id

    def test_unknown_category_returns_400(self, api_client):
        response = api_client.post(
            "/products",
            {
                "name": "Monitor",
                "price": "1",
                "quantity_in_stock": 1,
                "category_id": str(uuid4()),
            },
            format="json",
        )
        assert response.status_code == 400
        assert "error" in response.json()

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "Widget", "price": "-1", "quantity_in_stock": 1},
            {"name": "Widget", "price": "1", "quantity_in_stock": -1},
            {"name": "", "price": "1", "quantity_in_stock": 1},
            {"name": "Widget", "quantity_in_stock": 1},
            {"name": "Widget", "price": "abc", "quantity_in_stock": 1},
        ],
    )
    def test_invalid_payload_returns_400(self, api_client, payload):
        response = api_client.post("/products", payload, format="json")
        assert response.status_code == 400
        assert "error" in response.json()
        assert not Product.objects.exists()


class TestRetrieveProduct:
    def test_retrieve_returns_product(self, api_client, product):
        response = api_client.get(f"/products/{product.id}")
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == str(product.id)
        assert data["name"] == "Widget"
        assert data["quantity_in_stock"] == 10

    @pytest.mark.parametrize("product_id", [uuid4(), "not-a-uuid"])
    def test_retrieve_missing_returns_404(self, api_client, product_id):
        response = api_client.get(f"/products/{product_id}")
        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}
