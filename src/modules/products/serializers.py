"""Product DRF serializers for API output.

Input is validated by ``CreateProductDTO`` (Pydantic); this
serializer only renders stored products.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    category_name = serializers.CharField(
        source="category.name", read_only=True, default=None
    )

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "quantity_in_stock",
            "category_id",
            "category_name",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
