"""Order assembler.

Builds the unsaved ``Order`` and its ``OrderItem`` rows from priced
lines.  Persisting the pair is the repository's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence

from django.utils import timezone

from modules.orders.constants import DEFAULT_STATUS
from modules.orders.models import Order, OrderItem
from modules.orders.pricing import order_total

if TYPE_CHECKING:
    from modules.customers.models import Customer
    from modules.orders.pricing import PricedLine


@dataclass(frozen=True)
class AssembledOrder:
    order: Order
    items: List[OrderItem]


class OrderAssembler:
    """Turns a validated, priced request into an in-memory aggregate.

    ``clock`` supplies the order timestamp; tests pass a fixed one.
    """

    def __init__(self, clock: Callable[[], datetime] = timezone.now) -> None:
        self._clock = clock

    def assemble(
        self,
        customer: Customer,
        lines: Sequence[PricedLine],
        status: Optional[str] = None,
    ) -> AssembledOrder:
        order = Order(
            customer=customer,
            status=status or DEFAULT_STATUS,
            order_date=self._clock(),
            total_amount=order_total(line.subtotal for line in lines),
        )
        items = [
            OrderItem(
                product=line.product,
                quantity=line.quantity,
                unit_price=line.unit_price,
                subtotal=line.subtotal,
            )
            for line in lines
        ]
        return AssembledOrder(order=order, items=items)
