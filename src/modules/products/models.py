"""Catalog models: Category, Product and Supplier.

Business rules implemented:
- Price cannot be negative (DB check constraint).
- ``quantity_in_stock`` can never be negative (DB check constraint,
  on top of ``PositiveIntegerField``).  It is only mutated by the
  order service, through ``deduct_stock`` / ``restore_stock``.
- Products referenced by orders cannot be deleted (``PROTECT`` on
  ``Order.product``).  Deleting a category detaches its products.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class Category(BaseModel):
    name = models.CharField(max_length=255)

    class Meta:
        db_table = "categories"
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name


class Product(BaseModel):
    """Product aggregate root.

    The stock helpers only change the in-memory value; callers persist it
    while holding the row lock obtained through the repository.
    """

    name = models.CharField(max_length=255)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    quantity_in_stock = models.PositiveIntegerField(default=0)
    category = models.ForeignKey(
        "products.Category",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="products",
    )

    class Meta:
        db_table = "products"
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
            models.CheckConstraint(
                condition=models.Q(quantity_in_stock__gte=0),
                name="products_stock_non_negative",
            ),
        ]

    # ------------------------------------------------------------------
    # Stock helpers
    # ------------------------------------------------------------------

    def has_stock_for(self, quantity: int) -> bool:
        """Return ``True`` if *quantity* units can be taken from stock."""
        return self.quantity_in_stock >= quantity

    def deduct_stock(self, quantity: int) -> None:
        if not self.has_stock_for(quantity):
            raise ValueError(
                f"Cannot deduct {quantity} from stock of {self.quantity_in_stock}."
            )
        self.quantity_in_stock -= quantity

    def restore_stock(self, quantity: int) -> None:
        self.quantity_in_stock += quantity

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} ({self.quantity_in_stock} in stock)"


class Supplier(BaseModel):
    """Supplier directory entry; maintained through the admin only."""

    name = models.CharField(max_length=255)
    contact = models.CharField(max_length=255, blank=True, default="")

    class Meta:
        db_table = "suppliers"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
