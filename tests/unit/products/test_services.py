"""Unit tests for ProductService.

Covers:
- create_product: happy path, is_active default, duplicate SKU.
- update_product: partial update, tri-state is_active, SKU collision.
- get_product / get_product_by_sku / searches / count.
- delete_product: happy path, not found, product in use.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import (
    ProductAlreadyExists,
    ProductInUse,
    ProductNotFound,
)
from modules.products.models import Product
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.sku_taken.return_value = False
    repo.has_order_items.return_value = False
    repo.save.side_effect = lambda p: p
    return repo


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


def _make_product(**overrides) -> Product:
    defaults = {
        "id": 1,
        "name": "Notebook Dell",
        "price": Decimal("2999.99"),
        "stock_quantity": 10,
        "sku": "NB-DELL-01",
        "is_active": True,
    }
    defaults.update(overrides)
    return Product(**defaults)


# ===========================================================================
# create_product
# ===========================================================================


class TestCreateProduct:
    def test_success_defaults_to_active(self, service, mock_repo):
        dto = CreateProductDTO(
            name="Notebook Dell",
            price=Decimal("2999.99"),
            sku="nb-dell-01",
            stock_quantity=10,
            category="Electronics",
        )
        product = service.create_product(dto)

        assert product.sku == "NB-DELL-01"
        assert product.price == Decimal("2999.99")
        assert product.category == "Electronics"
        assert product.is_active is True
        mock_repo.sku_taken.assert_called_once_with("NB-DELL-01")

    def test_explicit_inactive_honoured(self, service):
        dto = CreateProductDTO(
            name="Old Mouse", price=Decimal("10.00"), sku="MOUSE-OLD", is_active=False
        )
        assert service.create_product(dto).is_active is False

    def test_duplicate_sku_raises(self, service, mock_repo):
        mock_repo.sku_taken.return_value = True
        dto = CreateProductDTO(name="Notebook Dell", price=Decimal("1.00"), sku="NB-1")

        with pytest.raises(ProductAlreadyExists, match="NB-1"):
            service.create_product(dto)
        mock_repo.save.assert_not_called()


# ===========================================================================
# update_product
# ===========================================================================


class TestUpdateProduct:
    def test_partial_update(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_product()

        product = service.update_product(1, UpdateProductDTO(price=Decimal("2799.90")))

        assert product.price == Decimal("2799.90")
        assert product.name == "Notebook Dell"
        assert product.stock_quantity == 10
        mock_repo.sku_taken.assert_not_called()

    def test_absent_is_active_leaves_flag_unchanged(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_product(is_active=False)

        product = service.update_product(1, UpdateProductDTO(name="Renamed Item"))

        assert product.is_active is False

    def test_explicit_false_deactivates(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_product()

        product = service.update_product(1, UpdateProductDTO(is_active=False))

        assert product.is_active is False

    def test_zero_stock_applied(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_product()

        product = service.update_product(1, UpdateProductDTO(stock_quantity=0))

        assert product.stock_quantity == 0

    def test_sku_collision_with_other_product_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_product()
        mock_repo.sku_taken.return_value = True

        with pytest.raises(ProductAlreadyExists):
            service.update_product(1, UpdateProductDTO(sku="OTHER-SKU"))
        mock_repo.sku_taken.assert_called_once_with("OTHER-SKU", exclude_id=1)
        mock_repo.save.assert_not_called()

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.update_product(99, UpdateProductDTO(name="Whatever"))


# ===========================================================================
# Queries
# ===========================================================================


class TestQueries:
    def test_get_product_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound):
            service.get_product(5)

    def test_get_product_by_sku(self, service, mock_repo):
        product = _make_product()
        mock_repo.get_by_sku.return_value = product
        assert service.get_product_by_sku("nb-dell-01") is product

    def test_get_product_by_sku_not_found(self, service, mock_repo):
        mock_repo.get_by_sku.return_value = None
        with pytest.raises(ProductNotFound, match="MISSING"):
            service.get_product_by_sku("MISSING")

    def test_searches_delegate(self, service, mock_repo):
        mock_repo.find_by_name.return_value = []
        mock_repo.find_by_category.return_value = []
        assert service.find_by_name("note") == []
        assert service.find_by_category("elec") == []
        mock_repo.find_by_name.assert_called_once_with("note")
        mock_repo.find_by_category.assert_called_once_with("elec")

    def test_count_products(self, service, mock_repo):
        mock_repo.count.return_value = 3
        assert service.count_products() == 3


# ===========================================================================
# delete_product
# ===========================================================================


class TestDeleteProduct:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_product()
        service.delete_product(1)
        mock_repo.delete.assert_called_once_with(1)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound):
            service.delete_product(1)

    def test_product_in_live_order_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_product()
        mock_repo.has_order_items.return_value = True
        with pytest.raises(ProductInUse):
            service.delete_product(1)
        mock_repo.delete.assert_not_called()
