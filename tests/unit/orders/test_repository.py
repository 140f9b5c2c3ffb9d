"""Unit tests for OrderDjangoRepository against the test database."""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.db import IntegrityError, connection
from django.test.utils import CaptureQueriesContext

from modules.orders.models import Order, OrderItem
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.repositories.interfaces import IOrderRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return OrderDjangoRepository()


@pytest.fixture()
def stored_order(repo, make_customer, make_product):
    customer = make_customer()
    notebook = make_product(price=Decimal("2999.99"))
    mouse = make_product(price=Decimal("99.99"))
    order = Order(customer=customer, total_amount=Decimal("6099.97"))
    items = [
        OrderItem(
            product=notebook,
            quantity=2,
            unit_price=Decimal("2999.99"),
            subtotal=Decimal("5999.98"),
        ),
        OrderItem(
            product=mouse,
            quantity=1,
            unit_price=Decimal("99.99"),
            subtotal=Decimal("99.99"),
        ),
    ]
    return repo.create_with_items(order, items)


class TestCreateWithItems:
    def test_implements_interface(self, repo):
        assert isinstance(repo, IOrderRepository)

    def test_persists_order_and_items(self, stored_order):
        assert stored_order.id is not None
        assert OrderItem.objects.filter(order=stored_order).count() == 2

    def test_failure_persists_nothing(self, repo, make_customer, make_product):
        customer = make_customer()
        product = make_product()
        order = Order(customer=customer, total_amount=Decimal("10.00"))
        bad_item = OrderItem(
            product=product, quantity=0, unit_price=Decimal("10.00"),
            subtotal=Decimal("0.00"),
        )

        with pytest.raises(IntegrityError):
            repo.create_with_items(order, [bad_item])

        assert Order.objects.count() == 0
        assert OrderItem.objects.count() == 0


class TestReads:
    def test_get_by_id_resolves_relations(self, repo, stored_order):
        order = repo.get_by_id(stored_order.id)

        with CaptureQueriesContext(connection) as ctx:
            assert order.customer.name.startswith("Customer")
            names = [item.product.name for item in order.items.all()]
        assert len(names) == 2
        assert len(ctx.captured_queries) == 0

    def test_get_by_id_unknown(self, repo):
        assert repo.get_by_id(12345) is None

    def test_list_by_customer(self, repo, stored_order, make_customer):
        other = make_customer()
        assert [o.id for o in repo.list_by_customer(stored_order.customer_id)] == [
            stored_order.id
        ]
        assert repo.list_by_customer(other.id) == []

    def test_list_by_status(self, repo, stored_order):
        assert len(repo.list_by_status("pending")) == 1
        assert repo.list_by_status("paid") == []

    def test_count(self, repo, stored_order):
        assert repo.count() == 1


class TestSaveAndDelete:
    def test_save_updates_status(self, repo, stored_order):
        stored_order.status = "shipped"
        repo.save(stored_order)
        assert Order.objects.get(id=stored_order.id).status == "shipped"

    def test_delete_cascades_to_items(self, repo, stored_order):
        assert repo.delete(stored_order.id) is True

        assert repo.get_by_id(stored_order.id) is None
        assert repo.count() == 0
        assert OrderItem.objects.alive().filter(order_id=stored_order.id).count() == 0
        assert OrderItem.objects.dead().filter(order_id=stored_order.id).count() == 2

    def test_delete_unknown(self, repo):
        assert repo.delete(999) is False

    def test_delete_twice(self, repo, stored_order):
        repo.delete(stored_order.id)
        assert repo.delete(stored_order.id) is False
