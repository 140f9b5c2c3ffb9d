"""Product repository interface.

Extends ``IRepository[Product]`` with the SKU look-ups required by the
uniqueness rule and the name/category search endpoints.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_sku(self, sku: str) -> Optional[Product]:
        """Retrieve a live product by SKU."""

    @abstractmethod
    def sku_taken(self, sku: str, exclude_id: Optional[int] = None) -> bool:
        """Whether any product (deleted ones included) uses ``sku``."""

    @abstractmethod
    def find_by_name(self, name: str) -> List[Product]:
        """Case-insensitive substring search on ``name``."""

    @abstractmethod
    def find_by_category(self, category: str) -> List[Product]:
        """Case-insensitive substring search on ``category``."""

    @abstractmethod
    def has_order_items(self, id: int) -> bool:
        """Whether a live order item still references the product."""
