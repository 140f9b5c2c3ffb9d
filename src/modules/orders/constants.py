"""Order domain constants.

Order status is a closed vocabulary: any of these values may follow any
other, and nothing outside it is ever persisted.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    PAID = "paid", "Paid"
    SHIPPED = "shipped", "Shipped"
    DELIVERED = "delivered", "Delivered"
    CANCELLED = "cancelled", "Cancelled"


DEFAULT_STATUS: str = OrderStatus.PENDING

STATUS_VALUES: frozenset[str] = frozenset(OrderStatus.values)
