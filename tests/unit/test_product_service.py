"""Unit tests for ProductService."""

from __future__ import annotations

import logging
from decimal import Decimal
from uuid import uuid4

import pytest

from modules.core.exceptions import ConstraintViolation
from modules.products.dtos import CreateProductDTO
from modules.products.exceptions import CategoryNotFound, ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


@pytest.fixture()
def service():
    return ProductService(repository=ProductDjangoRepository())


class TestCreateProduct:
    def test_creates_product_with_opening_stock(self, service):
        product = service.create_product(
            CreateProductDTO(name="Widget", price="9.99", quantity_in_stock=10)
        )
        stored = Product.objects.get(id=product.id)
        assert stored.price == Decimal("9.99")
        assert stored.quantity_in_stock == 10
        assert stored.category is None

    def test_creates_product_in_category(self, service, category):
        product = service.create_product(
            CreateProductDTO(
                name="Monitor",
                price="1299.90",
                quantity_in_stock=3,
                category_id=category.id,
            )
        )
        assert Product.objects.get(id=product.id).category == category

    def test_unknown_category_rejected(self, service):
        with pytest.raises(CategoryNotFound):
            service.create_product(
                CreateProductDTO(
                    name="Orphan", price="1", quantity_in_stock=1, category_id=uuid4()
                )
            )
        assert not Product.objects.exists()

    def test_insert_is_logged_once(self, service, caplog):
        with caplog.at_level(logging.INFO):
            service.create_product(
                CreateProductDTO(name="Widget", price="9.99", quantity_in_stock=10)
            )

        events = [
            record.msg["event"]
            for record in caplog.records
            if isinstance(record.msg, dict) and "event" in record.msg
        ]
        assert [e for e in events if e.startswith("product")] == ["product.created"]

    def test_unknown_category_is_a_constraint_violation(self):
        assert issubclass(CategoryNotFound, ConstraintViolation)


class TestGetProduct:
    def test_returns_product(self, service, product):
        assert service.get_product(str(product.id)) == product

    @pytest.mark.parametrize("product_id", [str(uuid4()), "not-a-uuid"])
    def test_missing_product_raises(self, service, product_id):
        with pytest.raises(ProductNotFound):
            service.get_product(product_id)


class TestLockMany:
    def test_returns_existing_rows_keyed_by_id(self, product, other_product):
        locked = ProductDjangoRepository().lock_many(
            [other_product.id, product.id, product.id, uuid4()]
        )
        assert set(locked) == {str(product.id), str(other_product.id)}
        assert locked[str(product.id)].quantity_in_stock == 10
