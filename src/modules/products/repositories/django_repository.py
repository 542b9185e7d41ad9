"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from django.core.exceptions import ValidationError
from django.db import transaction

from modules.products.models import Category, Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.select_related("category").filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        return entity

    def get_for_update(self, id: str) -> Optional[Product]:
        """Retrieve a product with a row-level lock (SELECT FOR UPDATE)."""
        try:
            return Product.objects.select_for_update().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def lock_many(self, ids: Iterable[str]) -> Dict[str, Product]:
        """Lock the given product rows sorted by PK to prevent deadlocks."""
        locked: Dict[str, Product] = {}
        for id in sorted({str(i) for i in ids}):
            product = self.get_for_update(id)
            if product is not None:
                locked[id] = product
        return locked

    def category_exists(self, category_id: str) -> bool:
        try:
            return Category.objects.filter(id=category_id).exists()
        except (ValueError, ValidationError):
            return False
