"""Order service layer (Use Cases).

Orchestrates order creation and status management.  All write
operations are atomic; the service defines the unit-of-work boundary.

Order creation runs, in order:
1. ``OrderValidator``: customer and products exist, products are active
   and have enough stock (stock is never decremented).
2. ``price_lines``: unit price snapshot and line subtotals.
3. ``OrderAssembler``: unsaved order + items with status and timestamp.
4. ``IOrderRepository.create_with_items``: all-or-nothing insert.
5. Re-fetch of the stored aggregate with relations resolved.

Stock checks take no row locks, so concurrent orders for the same
product can both pass the check.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.orders.assembler import OrderAssembler
from modules.orders.exceptions import OrderNotFound
from modules.orders.pricing import price_lines
from modules.orders.transitions import apply_status
from modules.orders.validators import OrderValidator

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.orders.dtos import CreateOrderDTO, UpdateOrderStatusDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection (DIP).  The validator
    and assembler are built from them unless supplied.
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        customer_repository: ICustomerRepository,
        product_repository: IProductRepository,
        validator: Optional[OrderValidator] = None,
        assembler: Optional[OrderAssembler] = None,
    ) -> None:
        self._order_repo = order_repository
        self._validator = validator or OrderValidator(
            customer_repository, product_repository
        )
        self._assembler = assembler or OrderAssembler()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Create a new order from a validated request.

        Raises:
            CustomerNotFound: customer does not exist.
            ProductNotFound: a product does not exist.
            ProductInactive: a product is inactive.
            InsufficientStock: a product has less stock than requested.
        """
        log = logger.bind(customer_id=dto.customer_id, item_count=len(dto.items))
        log.info("order.creation_started")

        validated = self._validator.validate(dto.customer_id, dto.items)
        priced = price_lines(validated.lines)
        assembled = self._assembler.assemble(validated.customer, priced, dto.status)

        order = self._order_repo.create_with_items(assembled.order, assembled.items)
        stored = self._order_repo.get_by_id(order.id)
        if not stored:
            raise OrderNotFound(f"Order {order.id} not found after creation.")

        log.info(
            "order.created",
            order_id=stored.id,
            total_amount=str(stored.total_amount),
            status=stored.status,
        )
        return stored

    @transaction.atomic
    def update_status(self, id: int, dto: UpdateOrderStatusDTO) -> Order:
        """Move an order to any status of the vocabulary.

        Raises:
            InvalidStatus: ``dto.status`` is not an order status.
            OrderNotFound: order does not exist.
        """
        order = self._order_repo.get_by_id(id)
        if not order:
            raise OrderNotFound(f"Order {id} not found.")

        previous = apply_status(order, dto.status)
        order = self._order_repo.save(order)

        logger.info(
            "order.status_changed",
            order_id=id,
            old_status=previous,
            new_status=order.status,
        )
        return order

    @transaction.atomic
    def delete_order(self, id: int) -> None:
        """Soft-delete an order and its items.

        Raises:
            OrderNotFound: order does not exist.
        """
        if not self._order_repo.delete(id):
            raise OrderNotFound(f"Order {id} not found.")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, id: int) -> Order:
        """Retrieve a single order with its customer and items.

        Raises:
            OrderNotFound: order does not exist.
        """
        order = self._order_repo.get_by_id(id)
        if not order:
            raise OrderNotFound(f"Order {id} not found.")
        return order

    def list_orders(self) -> List[Order]:
        return self._order_repo.list()

    def list_by_customer(self, customer_id: int) -> List[Order]:
        return self._order_repo.list_by_customer(customer_id)

    def list_by_status(self, status: str) -> List[Order]:
        return self._order_repo.list_by_status(status)

    def count_orders(self) -> int:
        return self._order_repo.count()
