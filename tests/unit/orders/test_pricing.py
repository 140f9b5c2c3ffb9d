"""Unit tests for order pricing."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.orders.pricing import line_subtotal, order_total, price_lines
from modules.orders.validators import ValidatedLine
from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestLineSubtotal:
    def test_price_times_quantity(self):
        assert line_subtotal(Decimal("2999.99"), 2) == Decimal("5999.98")

    def test_single_unit(self):
        assert line_subtotal(Decimal("99.99"), 1) == Decimal("99.99")


class TestOrderTotal:
    def test_sum_is_exact(self):
        assert order_total([Decimal("5999.98"), Decimal("99.99")]) == Decimal("6099.97")

    def test_empty_is_zero(self):
        assert order_total([]) == Decimal("0.00")

    def test_accepts_generator(self):
        assert order_total(Decimal("0.10") for _ in range(3)) == Decimal("0.30")


class TestPriceLines:
    def test_snapshots_price_and_subtotal(self):
        notebook = Product(id=1, name="Notebook", price=Decimal("2999.99"), sku="NB-1")
        mouse = Product(id=2, name="Mouse", price=Decimal("99.99"), sku="MS-1")

        priced = price_lines(
            [
                ValidatedLine(product=notebook, quantity=2),
                ValidatedLine(product=mouse, quantity=1),
            ]
        )

        assert [line.unit_price for line in priced] == [
            Decimal("2999.99"),
            Decimal("99.99"),
        ]
        assert [line.subtotal for line in priced] == [
            Decimal("5999.98"),
            Decimal("99.99"),
        ]
        assert order_total(line.subtotal for line in priced) == Decimal("6099.97")

    def test_later_price_change_does_not_alter_priced_line(self):
        product = Product(id=1, name="Notebook", price=Decimal("10.00"), sku="NB-1")
        (priced,) = price_lines([ValidatedLine(product=product, quantity=3)])

        product.price = Decimal("12.00")

        assert priced.unit_price == Decimal("10.00")
        assert priced.subtotal == Decimal("30.00")
