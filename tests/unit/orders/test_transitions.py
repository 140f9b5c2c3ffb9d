"""Unit tests for the order status guard."""

from __future__ import annotations

import itertools

import pytest

from modules.orders.constants import OrderStatus
from modules.orders.exceptions import InvalidStatus
from modules.orders.models import Order
from modules.orders.transitions import apply_status, ensure_valid_status

pytestmark = pytest.mark.unit

STATUSES = [choice.value for choice in OrderStatus]


class TestEnsureValidStatus:
    @pytest.mark.parametrize("value", STATUSES)
    def test_vocabulary_accepted(self, value):
        assert ensure_valid_status(value) == value

    @pytest.mark.parametrize("value", ["", "PAID", "refunded", "confirmed"])
    def test_other_values_rejected(self, value):
        with pytest.raises(InvalidStatus):
            ensure_valid_status(value)


class TestApplyStatus:
    @pytest.mark.parametrize(
        "current,requested", list(itertools.product(STATUSES, STATUSES))
    )
    def test_any_to_any(self, current, requested):
        order = Order(status=current)
        previous = apply_status(order, requested)
        assert previous == current
        assert order.status == requested

    def test_delivered_back_to_pending(self):
        order = Order(status=OrderStatus.DELIVERED)
        apply_status(order, "pending")
        assert order.status == OrderStatus.PENDING

    def test_invalid_status_leaves_order_untouched(self):
        order = Order(status=OrderStatus.PAID)
        with pytest.raises(InvalidStatus, match="Allowed"):
            apply_status(order, "lost")
        assert order.status == OrderStatus.PAID
