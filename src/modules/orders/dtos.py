"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateOrderItemDTO``: input for a single order line item.
- ``CreateOrderDTO``: input for order creation (nested items).
- ``UpdateOrderStatusDTO``: input for the status update endpoint.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from modules.orders.constants import STATUS_VALUES

# ``order_items.quantity`` is a positive 32-bit integer column.
MAX_QUANTITY = 2147483647


class CreateOrderItemDTO(BaseModel):
    """Immutable DTO for a single order item in a creation request.

    ``unit_price`` is resolved by the Service Layer from the product catalog.
    """

    model_config = ConfigDict(frozen=True)

    product_id: int
    quantity: int

    @field_validator("product_id")
    @classmethod
    def product_id_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Product id must be a positive integer.")
        return v

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        if v > MAX_QUANTITY:
            raise ValueError(f"Quantity must be at most {MAX_QUANTITY}.")
        return v


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    Validates:
    - ``customer_id`` is a positive integer.
    - ``items`` contains at least one item.
    - ``status``, when given and non-empty, belongs to the status vocabulary.
    """

    model_config = ConfigDict(frozen=True)

    customer_id: int
    items: List[CreateOrderItemDTO]
    status: Optional[str] = None

    @field_validator("customer_id")
    @classmethod
    def customer_id_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Customer id must be a positive integer.")
        return v

    @field_validator("items")
    @classmethod
    def items_must_not_be_empty(
        cls, v: List[CreateOrderItemDTO]
    ) -> List[CreateOrderItemDTO]:
        if not v:
            raise ValueError("Order must have at least one item.")
        return v

    @field_validator("status")
    @classmethod
    def status_in_vocabulary(cls, v: Optional[str]) -> Optional[str]:
        if v and v not in STATUS_VALUES:
            raise ValueError(
                f"Status must be one of: {', '.join(sorted(STATUS_VALUES))}."
            )
        return v or None


class UpdateOrderStatusDTO(BaseModel):
    """Immutable DTO for ``PUT /orders/{id}/``.

    Vocabulary membership is checked by the status guard so that an
    unknown value surfaces as ``InvalidStatus``.
    """

    model_config = ConfigDict(frozen=True)

    status: str
