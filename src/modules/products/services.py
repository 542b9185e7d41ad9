"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.  Stock levels
are only changed afterwards by the order service.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import transaction

from modules.core.db import translate_store_errors
from modules.products.exceptions import CategoryNotFound, ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @translate_store_errors()
    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product with its opening stock.

        Raises:
            CategoryNotFound: ``category_id`` was given but does not exist.
        """
        log = logger.bind(name=dto.name)

        category_id = str(dto.category_id) if dto.category_id else None
        if category_id and not self._repo.category_exists(category_id):
            log.warning("product.unknown_category", category_id=category_id)
            raise CategoryNotFound(f"Category {category_id} not found.")

        product = Product(
            name=dto.name,
            price=dto.price,
            quantity_in_stock=dto.quantity_in_stock,
            category_id=category_id,
        )
        product = self._repo.save(product)
        log.info("product.created", product_id=str(product.id))
        return product

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product(self, id: str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.retrieved", product_id=str(id))
        return product
