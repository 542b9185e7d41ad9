"""Product repository interface.

Extends ``IRepository[Product]`` with the row-locking reads the order
service needs for atomic stock reservation and release.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Dict, Iterable, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_for_update(self, id: str) -> Optional["Product"]:
        """Retrieve a product with a row-level lock (SELECT FOR UPDATE).

        Must be called inside a transaction.  Returns ``None`` if the
        product does not exist.
        """

    @abstractmethod
    def lock_many(self, ids: Iterable[str]) -> Dict[str, "Product"]:
        """Lock several product rows, in primary-key order.

        Returns a mapping ``str(id) -> Product`` holding one instance per
        row, so that callers touching the same product twice observe
        their own in-memory changes.  Missing ids are absent from the map.
        """

    @abstractmethod
    def category_exists(self, category_id: str) -> bool:
        """Check whether a category with the given ID exists."""
