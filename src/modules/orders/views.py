"""Order API views.

Exposes the ``OrderService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into appropriate
HTTP status codes; the view never swallows generic exceptions.

Status mapping: missing order or product -> 404, insufficient stock and
constraint violations (an unknown customer included) -> 400, any other
store failure -> 500.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import ConstraintViolation, StoreError
from modules.orders.dtos import CreateOrderDTO, UpdateOrderDTO
from modules.orders.exceptions import (
    InsufficientStock,
    OrderNotFound,
    ProductNotFound,
)
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import OrderInputSerializer, OrderSerializer
from modules.orders.services import OrderService
from modules.products.repositories.django_repository import ProductDjangoRepository


def _error(message: str, code: int) -> Response:
    return Response({"error": message}, status=code)


class OrderViewSet(GenericViewSet):
    """ViewSet for Order operations.

    Uses ``OrderService`` with injected repositories (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /orders"""
        input_serializer = OrderInputSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)
        dto = CreateOrderDTO(**input_serializer.validated_data)

        try:
            order = self._service.create_order(dto)
        except ProductNotFound:
            return _error("Product not found", status.HTTP_404_NOT_FOUND)
        except InsufficientStock as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)
        except ConstraintViolation as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)
        except StoreError as exc:
            return _error(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(
            {"order_id": str(order.id), "message": "Order created"},
            status=status.HTTP_200_OK,
        )

    # ------------------------------------------------------------------
    # Retrieve
    # ------------------------------------------------------------------

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /orders/{pk}"""
        try:
            order = self._service.get_order(pk or "")
        except OrderNotFound:
            return _error("Order not found", status.HTTP_404_NOT_FOUND)
        return Response(OrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /orders/{pk}

        Restores the previous reservation and reserves the new one in a
        single transaction.
        """
        input_serializer = OrderInputSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)
        dto = UpdateOrderDTO(**input_serializer.validated_data)

        try:
            updated = self._service.update_order(pk or "", dto)
        except OrderNotFound:
            return _error("Order not found", status.HTTP_404_NOT_FOUND)
        except ProductNotFound:
            return _error("Product not found", status.HTTP_404_NOT_FOUND)
        except InsufficientStock as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)
        except ConstraintViolation as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)
        except StoreError as exc:
            return _error(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({"message": "Order updated", "updated": updated})

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /orders/{pk}

        Releases the reserved stock and removes the order row.
        """
        try:
            deleted = self._service.delete_order(pk or "")
        except OrderNotFound:
            return _error("Order not found", status.HTTP_404_NOT_FOUND)
        except StoreError as exc:
            return _error(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({"message": "Order deleted", "deleted": deleted})
