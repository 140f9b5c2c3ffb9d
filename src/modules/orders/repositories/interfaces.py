"""Order repository interface.

Extends ``IRepository[Order]`` with the atomic aggregate creation and the
customer/status look-ups.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Sequence

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order, OrderItem


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root.

    The aggregate includes its OrderItem children; reads return orders
    with the customer and every item's product resolved.
    """

    @abstractmethod
    def create_with_items(self, order: Order, items: Sequence[OrderItem]) -> Order:
        """Persist ``order`` and all ``items`` together or not at all."""

    @abstractmethod
    def list_by_customer(self, customer_id: int) -> List[Order]:
        """Live orders placed by ``customer_id``."""

    @abstractmethod
    def list_by_status(self, status: str) -> List[Order]:
        """Live orders currently in ``status``."""
