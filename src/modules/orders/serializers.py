"""Order DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.models import Order


class OrderInputSerializer(serializers.Serializer):
    """Validates the create (POST) and update (PUT) payloads."""

    customer_id = serializers.UUIDField()
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1)


class OrderSerializer(serializers.ModelSerializer):
    """Read serializer for orders."""

    class Meta:
        model = Order
        fields = [
            "id",
            "customer_id",
            "product_id",
            "quantity",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
