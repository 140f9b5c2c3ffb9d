"""Order DRF serializers (output only).

Input is validated by the Pydantic DTOs in ``dtos.py``.

Nested ``customer`` / ``product`` objects are emitted only when the
relation was already loaded on the instance (``select_related`` or a
prior assignment) and is not null.  Otherwise the key is left out, and
rendering an order never triggers an extra query for them.
"""

from __future__ import annotations

from typing import Any, Optional

from django.db import models
from rest_framework import serializers

from modules.customers.serializers import CustomerSerializer
from modules.orders.models import Order, OrderItem
from modules.products.serializers import ProductSerializer


def resolved_relation(instance: models.Model, name: str) -> Optional[models.Model]:
    """Return the related object behind FK ``name`` if it is already cached."""
    field = instance._meta.get_field(name)
    if not field.is_cached(instance):
        return None
    return getattr(instance, name)


class _PartialSerializer(serializers.ModelSerializer):
    """Drops the optional relation keys whose value could not be resolved."""

    optional_relations: tuple[str, ...] = ()

    def to_representation(self, instance: Any) -> dict[str, Any]:
        data = super().to_representation(instance)
        for key in self.optional_relations:
            if data.get(key) is None:
                data.pop(key, None)
        return data


class OrderItemSerializer(_PartialSerializer):
    """Read serializer for order items with the product snapshot price."""

    optional_relations = ("product",)

    product_id = serializers.IntegerField(read_only=True)
    product = serializers.SerializerMethodField()

    class Meta:
        model = OrderItem
        fields = [
            "id",
            "product_id",
            "product",
            "quantity",
            "unit_price",
            "subtotal",
        ]
        read_only_fields = fields

    def get_product(self, item: OrderItem) -> Optional[dict[str, Any]]:
        product = resolved_relation(item, "product")
        return ProductSerializer(product).data if product is not None else None


class OrderSerializer(_PartialSerializer):
    """Read serializer for orders with nested items."""

    optional_relations = ("customer",)

    customer_id = serializers.IntegerField(read_only=True)
    customer = serializers.SerializerMethodField()
    items = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            "id",
            "customer_id",
            "customer",
            "items",
            "total_amount",
            "status",
            "order_date",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_customer(self, order: Order) -> Optional[dict[str, Any]]:
        customer = resolved_relation(order, "customer")
        return CustomerSerializer(customer).data if customer is not None else None

    def get_items(self, order: Order) -> list[dict[str, Any]]:
        prefetched = getattr(order, "_prefetched_objects_cache", {})
        items = order.items.all() if "items" in prefetched else order.items.alive()
        return OrderItemSerializer(items, many=True).data
