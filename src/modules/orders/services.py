"""Order service layer (Use Cases).

Keeps every product's ``quantity_in_stock`` equal to its baseline stock
minus the quantities of the live orders that reference it.

Business rules enforced:
- Only the product is checked up front.  An unknown customer is rejected
  by the store (foreign key) and surfaces as ``ConstraintViolation``.
- Stock is checked against a locked product row (SELECT FOR UPDATE) and
  never driven negative.
- Update and delete reverse the order's previous reservation first.
- Every command is one transaction: a failed check rolls back any stock
  already restored, leaving state exactly as it was before the call.
- Product rows are locked in primary-key order to prevent deadlocks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import transaction

from modules.core.db import translate_store_errors
from modules.orders.exceptions import (
    InsufficientStock,
    OrderNotFound,
    ProductNotFound,
)

if TYPE_CHECKING:
    from modules.orders.dtos import CreateOrderDTO, UpdateOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._order_repo = order_repository
        self._product_repo = product_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @translate_store_errors()
    @transaction.atomic
    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Create an order and reserve its stock.

        Steps:
        1. Lock the product row; validate it exists.
        2. Validate sufficient stock, then deduct it.
        3. Insert the order row.

        Raises:
            ProductNotFound: product does not exist.
            InsufficientStock: ``quantity`` exceeds the available stock.
            ConstraintViolation: the customer does not exist.  Foreign keys
                are checked when the transaction commits.
        """
        log = logger.bind(
            customer_id=str(dto.customer_id),
            product_id=str(dto.product_id),
            quantity=dto.quantity,
        )
        log.info("order.creation_started")

        product = self._product_repo.get_for_update(str(dto.product_id))
        if not product:
            raise ProductNotFound(f"Product {dto.product_id} not found.")

        self._deduct_stock(product, dto.quantity)

        order = self._order_repo.create(
            {
                "customer_id": dto.customer_id,
                "product_id": product.id,
                "quantity": dto.quantity,
            }
        )

        log.info("order.created", order_id=str(order.id))
        return order

    @translate_store_errors()
    @transaction.atomic
    def update_order(self, order_id: str, dto: UpdateOrderDTO) -> int:
        """Replace an order's customer, product and quantity.

        Steps:
        1. Lock the order row; validate it exists.
        2. Lock the old and new product rows (one row when unchanged).
        3. Restore the old quantity to the old product.
        4. Check the new quantity against the *restored* stock, deduct it.
        5. Overwrite the order fields.

        When the product is unchanged, steps 3 and 4 still run one after
        the other on the same row.  Any failure rolls the whole sequence
        back.

        Returns:
            The number of order rows updated (1).

        Raises:
            OrderNotFound: order does not exist.
            ProductNotFound: new product does not exist.
            InsufficientStock: not enough stock after restoration.
            ConstraintViolation: the new customer does not exist.
        """
        order = self._order_repo.get_for_update(str(order_id))
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")

        log = logger.bind(
            order_id=str(order.id),
            old_product_id=str(order.product_id),
            new_product_id=str(dto.product_id),
            old_quantity=order.quantity,
            new_quantity=dto.quantity,
        )
        log.info("order.update_started")

        locked = self._product_repo.lock_many([order.product_id, dto.product_id])
        old_product = locked.get(str(order.product_id))
        new_product = locked.get(str(dto.product_id))

        # 1. Reverse the previous reservation
        if old_product is not None:
            self._restore_stock(old_product, order.quantity)
        else:
            log.warning("order.previous_product_missing")

        # 2. Reserve again against the post-restore stock
        if new_product is None:
            raise ProductNotFound(f"Product {dto.product_id} not found.")
        self._deduct_stock(new_product, dto.quantity)

        updated = self._order_repo.update(
            str(order.id),
            {
                "customer_id": dto.customer_id,
                "product_id": new_product.id,
                "quantity": dto.quantity,
            },
        )

        log.info("order.updated", updated=updated)
        return updated

    @translate_store_errors()
    @transaction.atomic
    def delete_order(self, order_id: str) -> int:
        """Delete an order and release its reserved stock.

        Locks the order row **first** so concurrent deletions cannot
        release the same stock twice.

        Returns:
            The number of order rows deleted (1).

        Raises:
            OrderNotFound: order does not exist.
        """
        order = self._order_repo.get_for_update(str(order_id))
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")

        log = logger.bind(order_id=str(order.id), product_id=str(order.product_id))

        product = self._product_repo.get_for_update(str(order.product_id))
        if product is not None:
            self._restore_stock(product, order.quantity)
        else:
            log.warning("order.previous_product_missing")

        deleted = self._order_repo.delete(str(order.id))
        log.info("order.deleted", deleted=deleted)
        return deleted

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: str) -> Order:
        """Retrieve a single order by ID.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self._order_repo.get_by_id(order_id)
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")
        return order

    # ------------------------------------------------------------------
    # Stock helpers (caller holds the product row lock)
    # ------------------------------------------------------------------

    def _deduct_stock(self, product: Product, quantity: int) -> None:
        if not product.has_stock_for(quantity):
            logger.warning(
                "order.insufficient_stock",
                product_id=str(product.id),
                requested=quantity,
                available=product.quantity_in_stock,
            )
            raise InsufficientStock(
                f"Not enough stock for product {product.id}: "
                f"requested {quantity}, available {product.quantity_in_stock}."
            )

        product.deduct_stock(quantity)
        product.save(update_fields=["quantity_in_stock", "updated_at"])

        logger.info(
            "order.stock_reserved",
            product_id=str(product.id),
            quantity=quantity,
            remaining=product.quantity_in_stock,
        )

    def _restore_stock(self, product: Product, quantity: int) -> None:
        product.restore_stock(quantity)
        product.save(update_fields=["quantity_in_stock", "updated_at"])

        logger.info(
            "order.stock_released",
            product_id=str(product.id),
            quantity=quantity,
            restored_stock=product.quantity_in_stock,
        )
