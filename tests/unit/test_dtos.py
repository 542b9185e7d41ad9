"""Unit tests for the request DTOs.

Covers validation, sanitisation and frozen immutability.
"""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import ValidationError

from modules.customers.dtos import CreateCustomerDTO
from modules.orders.dtos import CreateOrderDTO, UpdateOrderDTO
from modules.products.dtos import CreateProductDTO

pytestmark = pytest.mark.unit


class TestCreateCustomerDTO:
    def test_strips_name_and_lowercases_email(self):
        dto = CreateCustomerDTO(name="  Ana Souza ", email=" Ana@Example.COM ")
        assert dto.name == "Ana Souza"
        assert dto.email == "ana@example.com"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError):
            CreateCustomerDTO(name=name, email="ana@example.com")

    def test_malformed_email_rejected(self):
        with pytest.raises(ValidationError):
            CreateCustomerDTO(name="Ana", email="not-an-email")

    def test_is_frozen(self):
        dto = CreateCustomerDTO(name="Ana", email="ana@example.com")
        with pytest.raises(ValidationError):
            dto.name = "Other"


class TestCreateProductDTO:
    def test_valid_product(self):
        dto = CreateProductDTO(name="Widget", price="9.99", quantity_in_stock=10)
        assert dto.price == Decimal("9.99")
        assert dto.quantity_in_stock == 10
        assert dto.category_id is None

    def test_zero_price_and_stock_allowed(self):
        dto = CreateProductDTO(name="Freebie", price="0", quantity_in_stock=0)
        assert dto.price == Decimal("0")
        assert dto.quantity_in_stock == 0

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="Price cannot be negative"):
            CreateProductDTO(name="Widget", price="-1", quantity_in_stock=1)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="Stock quantity cannot be negative"):
            CreateProductDTO(name="Widget", price="1", quantity_in_stock=-1)

    def test_missing_price_rejected(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="Widget", price=None, quantity_in_stock=1)

    def test_category_id_parsed_as_uuid(self):
        category_id = uuid4()
        dto = CreateProductDTO(
            name="Widget", price="1", quantity_in_stock=1, category_id=str(category_id)
        )
        assert dto.category_id == category_id


class TestOrderDTOs:
    def test_valid_order(self):
        customer_id, product_id = uuid4(), uuid4()
        dto = CreateOrderDTO(
            customer_id=str(customer_id), product_id=str(product_id), quantity=2
        )
        assert dto.customer_id == customer_id
        assert dto.product_id == product_id

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_non_positive_quantity_rejected(self, quantity):
        with pytest.raises(ValidationError, match="Quantity must be at least 1"):
            CreateOrderDTO(customer_id=uuid4(), product_id=uuid4(), quantity=quantity)

    def test_update_dto_shares_validation(self):
        with pytest.raises(ValidationError):
            UpdateOrderDTO(customer_id=uuid4(), product_id="nope", quantity=1)
