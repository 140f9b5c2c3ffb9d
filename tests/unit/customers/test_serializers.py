"""Unit tests for CustomerSerializer."""

from __future__ import annotations

import pytest

from modules.customers.serializers import CustomerSerializer

pytestmark = pytest.mark.unit


class TestCustomerSerializer:
    def test_fields(self, make_customer):
        customer = make_customer(name="Maria Souza", phone="11987654321")
        data = CustomerSerializer(customer).data
        assert set(data) == {
            "id",
            "name",
            "email",
            "cpf",
            "phone",
            "created_at",
            "updated_at",
        }
        assert data["id"] == customer.id
        assert data["name"] == "Maria Souza"
        assert data["phone"] == "11987654321"

    def test_deleted_at_not_exposed(self, make_customer):
        data = CustomerSerializer(make_customer()).data
        assert "deleted_at" not in data
