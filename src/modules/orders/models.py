"""Order model.

Business rules implemented:
- An order reserves ``quantity`` units of one product for one customer.
- ``quantity`` is a positive integer (validator + DB check constraint).
- Customer and product FKs use PROTECT: a referenced row cannot be
  deleted while the order is live, so its stock effect can always be
  reversed.
- Orders are hard-deleted; a live order is a row that exists.
"""

from __future__ import annotations

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class Order(BaseModel):
    """Order aggregate root.

    Stock bookkeeping lives in ``OrderService``; the model only holds the
    reservation.  ``customer_id`` / ``product_id`` / ``quantity`` are
    overwritten as a whole by an update.
    """

    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    quantity = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
    )

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="orders_created_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="orders_quantity_positive",
            ),
        ]

    def __str__(self) -> str:
        return f"Order {self.id} ({self.product_id} x{self.quantity})"
