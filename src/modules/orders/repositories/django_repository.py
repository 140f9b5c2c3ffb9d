"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
All write operations are wrapped in ``transaction.atomic()`` so the Order
aggregate (Order + OrderItems) is persisted and deleted as one unit.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import structlog
from django.db import transaction
from django.db.models import Prefetch
from django.utils import timezone

from modules.orders.models import Order, OrderItem
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    @staticmethod
    def _with_relations():
        """Live orders with the customer joined and live items prefetched.

        ``select_related`` for the customer FK (single JOIN) and a
        ``Prefetch`` for items -> product (one batched query).  Prevents N+1.
        """
        return (
            Order.objects.alive()
            .select_related("customer")
            .prefetch_related(
                Prefetch(
                    "items",
                    queryset=OrderItem.objects.alive().select_related("product"),
                )
            )
        )

    # ------------------------------------------------------------------
    # Create (aggregate root + children)
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_with_items(self, order: Order, items: Sequence[OrderItem]) -> Order:
        """Insert the order, then every item pointing at it.

        Any failure rolls back the whole aggregate.
        """
        order.save()
        for item in items:
            item.order = order
            item.save()

        logger.info(
            "order.persisted",
            order_id=order.id,
            customer_id=order.customer_id,
            item_count=len(items),
        )
        return order

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: int) -> Optional[Order]:
        return self._with_relations().filter(id=id).first()

    def list(self) -> List[Order]:
        return list(self._with_relations())

    def list_by_customer(self, customer_id: int) -> List[Order]:
        return list(self._with_relations().filter(customer_id=customer_id))

    def list_by_status(self, status: str) -> List[Order]:
        return list(self._with_relations().filter(status=status))

    def count(self) -> int:
        return Order.objects.alive().count()

    # ------------------------------------------------------------------
    # Save / Delete (IRepository contract)
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        """Persist changes to the order row (its items are left untouched)."""
        entity.save()
        logger.info("order.saved", order_id=entity.id, status=entity.status)
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Soft-delete an order together with its items.

        Returns ``False`` if no live order exists with the given ID.
        """
        order = Order.objects.alive().filter(id=id).first()
        if not order:
            return False

        now = timezone.now()
        item_count = order.items.alive().update(deleted_at=now, updated_at=now)
        order.deleted_at = now
        order.save(update_fields=["deleted_at"])

        logger.info("order.soft_deleted", order_id=id, item_count=item_count)
        return True
