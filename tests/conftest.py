from decimal import Decimal
from itertools import count

import pytest

from rest_framework.test import APIClient

from modules.customers.models import Customer
from modules.products.models import Product

VALID_CPFS = ["59860184275", "52998224725", "11144477735"]


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_customer():
    """Factory persisting customers with distinct valid CPFs and emails."""
    cpfs = iter(VALID_CPFS)
    seq = count(1)

    def _make(**overrides) -> Customer:
        n = next(seq)
        data = {
            "name": f"Customer {n}",
            "email": f"customer{n}@example.com",
            "cpf": next(cpfs),
        }
        data.update(overrides)
        customer = Customer(**data)
        customer.save()
        return customer

    return _make


@pytest.fixture()
def make_product():
    """Factory persisting active products with distinct SKUs."""
    seq = count(1)

    def _make(**overrides) -> Product:
        n = next(seq)
        data = {
            "name": f"Product {n}",
            "price": Decimal("10.00"),
            "stock_quantity": 100,
            "sku": f"SKU-{n:03d}",
        }
        data.update(overrides)
        product = Product(**data)
        product.save()
        return product

    return _make
