"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- SKU must be unique (checked on create and on SKU change).
- Price > 0 and stock >= 0 (validated by the DTOs).
- Soft delete via repository, refused while live orders contain
  the product.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.products.exceptions import (
    ProductAlreadyExists,
    ProductInUse,
    ProductNotFound,
)
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

_UPDATABLE_FIELDS = (
    "name",
    "description",
    "price",
    "stock_quantity",
    "sku",
    "category",
    "is_active",
)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product after enforcing SKU uniqueness.

        An absent ``is_active`` defaults to ``True``.

        Raises:
            ProductAlreadyExists: if the SKU is already taken.
        """
        log = logger.bind(sku=dto.sku)

        if self._repo.sku_taken(dto.sku):
            log.warning("product.duplicate_sku")
            raise ProductAlreadyExists(f"SKU '{dto.sku}' already registered.")

        product = Product(
            name=dto.name,
            description=dto.description,
            price=dto.price,
            stock_quantity=dto.stock_quantity,
            sku=dto.sku,
            category=dto.category,
            is_active=True if dto.is_active is None else dto.is_active,
        )
        product = self._repo.save(product)
        log.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def update_product(self, id: int, dto: UpdateProductDTO) -> Product:
        """Update an existing product with the supplied fields.

        Raises:
            ProductNotFound: if the product does not exist.
            ProductAlreadyExists: if the new SKU belongs to another product.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")

        log = logger.bind(product_id=id)

        if dto.sku is not None and self._repo.sku_taken(dto.sku, exclude_id=id):
            log.warning("product.duplicate_sku", sku=dto.sku)
            raise ProductAlreadyExists(
                f"SKU '{dto.sku}' already registered to another product."
            )

        for field in _UPDATABLE_FIELDS:
            value = getattr(dto, field)
            if value is not None:
                setattr(product, field, value)

        product = self._repo.save(product)
        log.info("product.updated")
        return product

    @transaction.atomic
    def delete_product(self, id: int) -> None:
        """Soft-delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
            ProductInUse: if a live order still contains the product.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        if self._repo.has_order_items(id):
            logger.warning("product.delete_refused", product_id=id)
            raise ProductInUse(f"Product {id} is part of an order and cannot be deleted.")
        self._repo.delete(id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        return self._repo.list()

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        return product

    def get_product_by_sku(self, sku: str) -> Product:
        """Retrieve a single product by SKU (case-insensitive).

        Raises:
            ProductNotFound: if no live product carries the SKU.
        """
        product = self._repo.get_by_sku(sku)
        if not product:
            raise ProductNotFound(f"Product with SKU '{sku}' not found.")
        return product

    def find_by_name(self, name: str) -> List[Product]:
        return self._repo.find_by_name(name)

    def find_by_category(self, category: str) -> List[Product]:
        return self._repo.find_by_category(category)

    def count_products(self) -> int:
        return self._repo.count()
