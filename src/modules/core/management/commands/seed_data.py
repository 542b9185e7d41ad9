from __future__ import annotations

import random
from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.customers.models import Customer
from modules.orders.dtos import CreateOrderDTO
from modules.orders.exceptions import InsufficientStock
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService
from modules.products.models import Category, Product, Supplier
from modules.products.repositories.django_repository import ProductDjangoRepository


class Command(BaseCommand):
    help = "Seed database with realistic development data."

    def add_arguments(self, parser):
        parser.add_argument(
            "--orders",
            type=int,
            default=20,
            help="Number of orders to place (default: 20).",
        )

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        categories = self._seed_categories()
        suppliers = self._seed_suppliers()
        products = self._seed_products(categories)
        customers = self._seed_customers()
        orders_created = self._seed_orders(customers, products, options["orders"])

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"categories={len(categories)}, "
                f"suppliers={len(suppliers)}, "
                f"products={len(products)}, "
                f"customers={len(customers)}, "
                f"orders={orders_created}"
            )
        )

    def _seed_categories(self) -> dict[str, Category]:
        self.stdout.write("Creating categories...")
        categories = {}
        for name in ("Electronics", "Furniture", "Office"):
            category, _ = Category.objects.get_or_create(name=name)
            categories[name] = category
        self.stdout.write(self.style.SUCCESS("Creating categories... Done!"))
        return categories

    def _seed_suppliers(self) -> list[Supplier]:
        self.stdout.write("Creating suppliers...")
        suppliers = []
        for name, contact in (
            ("Acme Distribution", "+1 555 0100"),
            ("Northwind Traders", "+1 555 0111"),
        ):
            supplier, _ = Supplier.objects.get_or_create(
                name=name, defaults={"contact": contact}
            )
            suppliers.append(supplier)
        self.stdout.write(self.style.SUCCESS("Creating suppliers... Done!"))
        return suppliers

    def _seed_products(self, categories: dict[str, Category]) -> list[Product]:
        self.stdout.write("Creating products...")
        products: list[Product] = []
        catalog = [
            ('Monitor 27"', "Electronics", Decimal("1299.90")),
            ("Mechanical Keyboard", "Electronics", Decimal("399.90")),
            ("Gaming Mouse", "Electronics", Decimal("249.90")),
            ("Headset", "Electronics", Decimal("299.90")),
            ("Office Desk", "Furniture", Decimal("899.00")),
            ("Ergonomic Chair", "Furniture", Decimal("1499.00")),
            ("Bookshelf", "Furniture", Decimal("699.00")),
            ("A4 Paper", "Office", Decimal("29.90")),
            ("Blue Pen", "Office", Decimal("4.90")),
            ("Notebook", "Office", Decimal("19.90")),
            ("Stapler", "Office", Decimal("39.90")),
            ("Calculator", "Office", Decimal("89.90")),
        ]
        for name, category, price in catalog:
            product, _ = Product.objects.get_or_create(
                name=name,
                defaults={
                    "price": price,
                    "quantity_in_stock": random.randint(10, 200),
                    "category": categories[category],
                },
            )
            products.append(product)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products

    def _seed_customers(self) -> list[Customer]:
        self.stdout.write("Creating customers...")
        customers: list[Customer] = []
        seed_customers = [
            ("Ana Souza", "ana@example.com"),
            ("Bruno Lima", "bruno@example.com"),
            ("Carla Mendes", "carla@example.com"),
            ("Daniel Costa", "daniel@example.com"),
            ("Helena Ferreira", "helena@example.com"),
            ("Julia Oliveira", "julia@example.com"),
        ]
        for name, email in seed_customers:
            customer, _ = Customer.objects.get_or_create(
                email=email, defaults={"name": name}
            )
            customers.append(customer)
        self.stdout.write(self.style.SUCCESS("Creating customers... Done!"))
        return customers

    def _seed_orders(
        self, customers: list[Customer], products: list[Product], count: int
    ) -> int:
        self.stdout.write("Creating orders...")
        if not customers or not products:
            self.stdout.write(self.style.WARNING("Skipping orders (no customers/products)."))
            return 0
        if Order.objects.exists():
            self.stdout.write(self.style.WARNING("Skipping orders (already seeded)."))
            return 0

        # Orders go through the service so stock is reserved like any API call.
        service = OrderService(
            order_repository=OrderDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )
        orders_created = 0
        for _ in range(count):
            dto = CreateOrderDTO(
                customer_id=random.choice(customers).id,
                product_id=random.choice(products).id,
                quantity=random.randint(1, 5),
            )
            try:
                service.create_order(dto)
            except InsufficientStock:
                continue
            orders_created += 1

        self.stdout.write(self.style.SUCCESS("Creating orders... Done!"))
        return orders_created
