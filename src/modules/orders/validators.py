"""Order validator.

Resolves the customer and every ordered product through the injected
repositories and enforces the creation preconditions.  Read-only: stock
is checked, never decremented.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence, Tuple

import structlog

from modules.orders.exceptions import (
    CustomerNotFound,
    InsufficientStock,
    ProductInactive,
    ProductNotFound,
)

if TYPE_CHECKING:
    from modules.customers.models import Customer
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.orders.dtos import CreateOrderItemDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ValidatedLine:
    product: Product
    quantity: int


@dataclass(frozen=True)
class ValidatedOrder:
    customer: Customer
    lines: Tuple[ValidatedLine, ...]


class OrderValidator:
    """Checks that an order request can be fulfilled.

    Lines are checked in request order and the first failure is raised;
    later lines are not inspected.
    """

    def __init__(
        self,
        customer_repository: ICustomerRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._customers = customer_repository
        self._products = product_repository

    def validate(
        self, customer_id: int, items: Sequence[CreateOrderItemDTO]
    ) -> ValidatedOrder:
        """Resolve ``customer_id`` and every item's product.

        Raises:
            CustomerNotFound: no live customer has ``customer_id``.
            ProductNotFound: a line names an unknown product id.
            ProductInactive: a line names an inactive product.
            InsufficientStock: a line asks for more than the product's stock.
        """
        customer = self._customers.get_by_id(customer_id)
        if not customer:
            logger.warning("order.customer_not_found", customer_id=customer_id)
            raise CustomerNotFound(f"Customer {customer_id} not found.")

        lines = []
        for item in items:
            product = self._products.get_by_id(item.product_id)
            if not product:
                logger.warning("order.product_not_found", product_id=item.product_id)
                raise ProductNotFound(item.product_id)
            if not product.is_active:
                logger.warning("order.product_inactive", product_id=product.id)
                raise ProductInactive(product.name)
            if product.stock_quantity < item.quantity:
                logger.warning(
                    "order.insufficient_stock",
                    product_id=product.id,
                    available=product.stock_quantity,
                    requested=item.quantity,
                )
                raise InsufficientStock(
                    product.name, product.stock_quantity, item.quantity
                )
            lines.append(ValidatedLine(product=product, quantity=item.quantity))

        return ValidatedOrder(customer=customer, lines=tuple(lines))
