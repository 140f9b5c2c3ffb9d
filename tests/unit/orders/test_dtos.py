"""Unit tests for Order DTOs."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.orders.dtos import CreateOrderDTO, CreateOrderItemDTO, UpdateOrderStatusDTO

pytestmark = pytest.mark.unit


class TestCreateOrderItemDTO:
    def test_valid(self):
        item = CreateOrderItemDTO(product_id=1, quantity=2)
        assert item.product_id == 1
        assert item.quantity == 2

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_non_positive_quantity_rejected(self, quantity):
        with pytest.raises(ValidationError, match="Quantity must be at least 1"):
            CreateOrderItemDTO(product_id=1, quantity=quantity)

    def test_non_positive_product_id_rejected(self):
        with pytest.raises(ValidationError, match="positive integer"):
            CreateOrderItemDTO(product_id=0, quantity=1)

    def test_quantity_above_column_range_rejected(self):
        with pytest.raises(ValidationError, match="at most 2147483647"):
            CreateOrderItemDTO(product_id=1, quantity=2**31)

    def test_quantity_at_column_limit_accepted(self):
        assert CreateOrderItemDTO(product_id=1, quantity=2**31 - 1).quantity == 2**31 - 1

    def test_fractional_quantity_rejected(self):
        with pytest.raises(ValidationError):
            CreateOrderItemDTO(product_id=1, quantity=1.5)


class TestCreateOrderDTO:
    def test_nested_items_parsed(self):
        dto = CreateOrderDTO(
            customer_id=1,
            items=[{"product_id": 1, "quantity": 2}, {"product_id": 2, "quantity": 1}],
        )
        assert len(dto.items) == 2
        assert isinstance(dto.items[0], CreateOrderItemDTO)
        assert dto.status is None

    def test_empty_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            CreateOrderDTO(customer_id=1, items=[])

    def test_missing_customer_rejected(self):
        with pytest.raises(ValidationError):
            CreateOrderDTO(customer_id=None, items=[{"product_id": 1, "quantity": 1}])

    def test_non_positive_customer_rejected(self):
        with pytest.raises(ValidationError, match="positive integer"):
            CreateOrderDTO(customer_id=-1, items=[{"product_id": 1, "quantity": 1}])

    def test_empty_status_means_unspecified(self):
        dto = CreateOrderDTO(
            customer_id=1, items=[{"product_id": 1, "quantity": 1}], status=""
        )
        assert dto.status is None

    def test_known_status_kept(self):
        dto = CreateOrderDTO(
            customer_id=1, items=[{"product_id": 1, "quantity": 1}], status="paid"
        )
        assert dto.status == "paid"

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError, match="Status must be one of"):
            CreateOrderDTO(
                customer_id=1, items=[{"product_id": 1, "quantity": 1}], status="lost"
            )


class TestUpdateOrderStatusDTO:
    def test_status_required(self):
        with pytest.raises(ValidationError):
            UpdateOrderStatusDTO(status=None)

    def test_any_string_accepted_for_guard(self):
        assert UpdateOrderStatusDTO(status="whatever").status == "whatever"
