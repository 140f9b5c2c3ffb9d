"""Order pricing.

Pure functions: the unit price is snapshotted from the product at
pricing time and every subtotal is computed here, before persistence.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, List, Sequence

if TYPE_CHECKING:
    from modules.orders.validators import ValidatedLine
    from modules.products.models import Product

ZERO = Decimal("0.00")


@dataclass(frozen=True)
class PricedLine:
    product: Product
    quantity: int
    unit_price: Decimal
    subtotal: Decimal


def line_subtotal(unit_price: Decimal, quantity: int) -> Decimal:
    return unit_price * quantity


def order_total(subtotals: Iterable[Decimal]) -> Decimal:
    return sum(subtotals, ZERO)


def price_lines(lines: Sequence[ValidatedLine]) -> List[PricedLine]:
    """Snapshot each product's current price and compute the subtotal."""
    priced = []
    for line in lines:
        unit_price = line.product.price
        priced.append(
            PricedLine(
                product=line.product,
                quantity=line.quantity,
                unit_price=unit_price,
                subtotal=line_subtotal(unit_price, line.quantity),
            )
        )
    return priced
