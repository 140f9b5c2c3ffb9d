"""Order domain exceptions.

Raised by the Service Layer (and the order validator) when business
rules are violated.  The API layer (Views) catches these and translates
them into appropriate HTTP responses.
"""

from __future__ import annotations


class OrderNotFound(Exception):
    """The requested order does not exist or has been soft-deleted."""


class InvalidStatus(Exception):
    """The requested status is outside the order status vocabulary."""


class CustomerNotFound(Exception):
    """The customer referenced by the order does not exist."""


class ProductNotFound(Exception):
    """A product referenced by an order item does not exist."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found.")
        self.product_id = product_id


class ProductInactive(Exception):
    """A product referenced by an order item is inactive."""

    def __init__(self, product_name: str) -> None:
        super().__init__(f"Product '{product_name}' is inactive.")
        self.product_name = product_name


class InsufficientStock(Exception):
    """Not enough stock to fulfil an order item."""

    def __init__(self, product_name: str, available: int, requested: int) -> None:
        super().__init__(
            f"Insufficient stock for product '{product_name}': "
            f"{available} available, {requested} requested."
        )
        self.product_name = product_name
        self.available = available
        self.requested = requested
