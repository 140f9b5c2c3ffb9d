"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.db import transaction

from modules.products.models import Product, normalize_sku
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        return Product.objects.alive().filter(id=id).first()

    def get_by_sku(self, sku: str) -> Optional[Product]:
        return Product.objects.alive().filter(sku=normalize_sku(sku)).first()

    def list(self) -> List[Product]:
        return list(Product.objects.alive())

    def find_by_name(self, name: str) -> List[Product]:
        return list(Product.objects.alive().filter(name__icontains=name))

    def find_by_category(self, category: str) -> List[Product]:
        return list(Product.objects.alive().filter(category__icontains=category))

    def count(self) -> int:
        return Product.objects.alive().count()

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info(
            "product.saved",
            product_id=entity.id,
            sku=entity.sku,
        )
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Soft-delete a product by ID.

        Returns ``True`` if the product was found and soft-deleted,
        ``False`` if no live product exists with the given ID.
        """
        product = self.get_by_id(id)
        if not product:
            return False
        product.delete()
        logger.info("product.soft_deleted", product_id=id)
        return True

    def sku_taken(self, sku: str, exclude_id: Optional[int] = None) -> bool:
        return (
            Product.objects.filter(sku=normalize_sku(sku))
            .exclude(id=exclude_id)
            .exists()
        )

    def has_order_items(self, id: int) -> bool:
        product = Product.objects.filter(id=id).first()
        if not product:
            return False
        return product.order_items.alive().filter(order__deleted_at__isnull=True).exists()
