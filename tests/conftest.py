from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.customers.models import Customer
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService
from modules.products.models import Category, Product
from modules.products.repositories.django_repository import ProductDjangoRepository


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def customer():
    return Customer.objects.create(name="Ana Souza", email="ana@example.com")


@pytest.fixture()
def category():
    return Category.objects.create(name="Electronics")


@pytest.fixture()
def product():
    """A persisted product with 10 units in stock."""
    return Product.objects.create(
        name="Widget", price=Decimal("9.99"), quantity_in_stock=10
    )


@pytest.fixture()
def other_product():
    return Product.objects.create(
        name="Gadget", price=Decimal("19.90"), quantity_in_stock=4
    )


@pytest.fixture()
def order_service():
    """OrderService wired to the Django ORM repositories."""
    return OrderService(
        order_repository=OrderDjangoRepository(),
        product_repository=ProductDjangoRepository(),
    )
