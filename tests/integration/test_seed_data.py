import pytest
from django.core.management import call_command

from modules.customers.models import Customer
from modules.orders.models import Order
from modules.products.models import Category, Product, Supplier

pytestmark = pytest.mark.integration


class TestSeedData:
    def test_seed_creates_catalog_and_orders(self):
        call_command("seed_data", orders=10)

        assert Category.objects.count() == 3
        assert Supplier.objects.count() == 2
        assert Product.objects.count() == 12
        assert Customer.objects.count() == 6
        assert 0 < Order.objects.count() <= 10

    def test_seeded_stock_is_never_negative(self):
        call_command("seed_data", orders=50)
        assert not Product.objects.filter(quantity_in_stock__lt=0).exists()

    def test_seed_is_idempotent(self):
        call_command("seed_data", orders=5)
        orders = Order.objects.count()

        call_command("seed_data", orders=5)

        assert Product.objects.count() == 12
        assert Customer.objects.count() == 6
        assert Order.objects.count() == orders
