"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.

``is_active`` is tri-state on both DTOs: ``None`` means "not supplied",
so an explicit ``false`` is never confused with an absent field.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.products.models import normalize_sku


def _check_length(field: str, v: str, minimum: int, maximum: int) -> str:
    if not minimum <= len(v) <= maximum:
        if minimum:
            raise ValueError(
                f"{field} must have between {minimum} and {maximum} characters."
            )
        raise ValueError(f"{field} must have at most {maximum} characters.")
    return v


def _price_from_float(v):
    # JSON numbers arrive as floats; parse their shortest repr.
    return str(v) if isinstance(v, float) else v


# Bounds of the ``products`` columns: DECIMAL(10, 2) and a positive 32-bit integer.
Price = Annotated[Decimal, Field(gt=0, max_digits=10, decimal_places=2)]
StockQuantity = Annotated[int, Field(ge=0, le=2147483647)]


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` has 3–200 characters; ``description`` at most 1000.
    - ``price`` is a Decimal greater than zero that fits DECIMAL(10, 2).
    - ``stock_quantity`` is between 0 and 2147483647.
    - ``sku`` has 3–50 characters (normalised to upper-case).
    - ``category`` has at most 100 characters.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Price
    sku: str
    description: str = ""
    stock_quantity: StockQuantity = 0
    category: str = ""
    is_active: bool | None = None

    @field_validator("name")
    @classmethod
    def name_length(cls, v: str) -> str:
        return _check_length("Name", v.strip(), 3, 200)

    @field_validator("description")
    @classmethod
    def description_length(cls, v: str) -> str:
        return _check_length("Description", v, 0, 1000)

    @field_validator("price", mode="before")
    @classmethod
    def price_from_float(cls, v):
        return _price_from_float(v)

    @field_validator("sku")
    @classmethod
    def sku_length(cls, v: str) -> str:
        return _check_length("SKU", normalize_sku(v), 3, 50)

    @field_validator("category")
    @classmethod
    def category_length(cls, v: str) -> str:
        return _check_length("Category", v.strip(), 0, 100)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional; only supplied fields will be updated.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    description: str | None = None
    price: Price | None = None
    stock_quantity: StockQuantity | None = None
    sku: str | None = None
    category: str | None = None
    is_active: bool | None = None

    @field_validator("name")
    @classmethod
    def name_length(cls, v: str | None) -> str | None:
        return _check_length("Name", v.strip(), 3, 200) if v is not None else None

    @field_validator("description")
    @classmethod
    def description_length(cls, v: str | None) -> str | None:
        return _check_length("Description", v, 0, 1000) if v is not None else None

    @field_validator("price", mode="before")
    @classmethod
    def price_from_float(cls, v):
        return _price_from_float(v)

    @field_validator("sku")
    @classmethod
    def sku_length(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return _check_length("SKU", normalize_sku(v), 3, 50)

    @field_validator("category")
    @classmethod
    def category_length(cls, v: str | None) -> str | None:
        return _check_length("Category", v.strip(), 0, 100) if v is not None else None
