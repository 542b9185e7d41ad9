"""Order repository interface.

Extends ``IRepository[Order]`` with the row-locking read and the
counted update/delete the order service reports back to clients.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root."""

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Order:
        """Insert an order.

        ``data`` must include ``customer_id``, ``product_id`` and ``quantity``.
        """

    @abstractmethod
    def update(self, id: str, data: Dict[str, Any]) -> int:
        """Overwrite order fields; return the number of rows updated."""

    @abstractmethod
    def delete(self, id: str) -> int:
        """Remove an order row; return the number of rows deleted."""

    @abstractmethod
    def get_for_update(self, id: str) -> Optional[Order]:
        """Retrieve an order with a row-level lock (SELECT FOR UPDATE)."""
