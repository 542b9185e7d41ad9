"""Unit tests for model-level helpers."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.customers.models import Customer
from modules.products.models import Category, Product, Supplier

pytestmark = pytest.mark.unit


class TestProductStockHelpers:
    def _product(self, stock: int) -> Product:
        return Product(name="Widget", price=Decimal("1.00"), quantity_in_stock=stock)

    def test_has_stock_for(self):
        product = self._product(5)
        assert product.has_stock_for(5)
        assert not product.has_stock_for(6)

    def test_deduct_stock(self):
        product = self._product(5)
        product.deduct_stock(2)
        assert product.quantity_in_stock == 3

    def test_deduct_more_than_available_raises(self):
        product = self._product(1)
        with pytest.raises(ValueError):
            product.deduct_stock(2)
        assert product.quantity_in_stock == 1

    def test_restore_stock(self):
        product = self._product(0)
        product.restore_stock(4)
        assert product.quantity_in_stock == 4


class TestBaseModel:
    def test_ids_are_uuid7(self, product):
        assert product.id.version == 7
        assert product.created_at is not None

    def test_save_with_update_fields_touches_updated_at(self, product):
        before = product.updated_at
        product.quantity_in_stock = 3
        product.save(update_fields=["quantity_in_stock"])
        product.refresh_from_db()
        assert product.quantity_in_stock == 3
        assert product.updated_at >= before


class TestCustomerModel:
    def test_email_is_normalised_on_save(self):
        customer = Customer.objects.create(name="Ana", email=" Ana@Example.com ")
        assert customer.email == "ana@example.com"

    def test_str_masks_email(self, customer):
        assert str(customer) == "Ana Souza (a***@example.com)"
        assert "ana@example.com" not in str(customer)


class TestCatalogModels:
    def test_deleting_category_detaches_products(self, category):
        product = Product.objects.create(
            name="Widget", price=Decimal("1.00"), quantity_in_stock=1, category=category
        )
        category.delete()
        product.refresh_from_db()
        assert product.category is None

    def test_supplier_contact_defaults_to_empty(self):
        supplier = Supplier.objects.create(name="Acme")
        assert supplier.contact == ""
        assert str(supplier) == "Acme"

    def test_category_str(self, category):
        assert str(category) == "Electronics"
