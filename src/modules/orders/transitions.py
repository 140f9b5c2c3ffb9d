"""Order status guard.

The status vocabulary is closed but the transition graph is open: an
order may move from any status to any other status in the vocabulary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.orders.constants import STATUS_VALUES
from modules.orders.exceptions import InvalidStatus

if TYPE_CHECKING:
    from modules.orders.models import Order


def ensure_valid_status(value: str) -> str:
    """Return ``value`` if it names an order status.

    Raises:
        InvalidStatus: ``value`` is outside the vocabulary.
    """
    if value not in STATUS_VALUES:
        raise InvalidStatus(
            f"Invalid status '{value}'. "
            f"Allowed: {', '.join(sorted(STATUS_VALUES))}."
        )
    return value


def apply_status(order: Order, requested: str) -> str:
    """Set ``order.status`` to ``requested`` and return the previous status."""
    previous = order.status
    order.status = ensure_valid_status(requested)
    return previous
