"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
Concurrency control relies on ``select_for_update()`` row locks taken
inside the caller's transaction (the service defines the boundary).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Order:
        order = Order(
            customer_id=data["customer_id"],
            product_id=data["product_id"],
            quantity=data["quantity"],
        )
        order.save()
        return order

    # ------------------------------------------------------------------
    # Update / Delete
    # ------------------------------------------------------------------

    @transaction.atomic
    def update(self, id: str, data: Dict[str, Any]) -> int:
        """Overwrite order fields in a single UPDATE statement.

        ``QuerySet.update`` bypasses ``auto_now``, so ``updated_at`` is
        set explicitly.
        """
        fields = {key: value for key, value in data.items() if value is not None}
        fields["updated_at"] = timezone.now()
        return Order.objects.filter(id=id).update(**fields)

    @transaction.atomic
    def delete(self, id: str) -> int:
        deleted, _ = Order.objects.filter(id=id).delete()
        return deleted

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with its customer and product.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return (
                Order.objects.select_related("customer", "product")
                .filter(id=id)
                .first()
            )
        except (ValueError, ValidationError):
            return None

    def get_for_update(self, id: str) -> Optional[Order]:
        """Retrieve an order with a row-level lock (SELECT FOR UPDATE).

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Order.objects.select_for_update().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        """Persist (create or update) an order."""
        entity.save()
        return entity
