"""Unit tests for CustomerService.

Covers:
- create_customer: happy path, duplicate CPF, duplicate email.
- update_customer: happy path, not found, email collision.
- get_customer / find_by_name / count_customers.
- delete_customer: happy path, not found, referenced by orders.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerInUse,
    CustomerNotFound,
)
from modules.customers.models import Customer
from modules.customers.services import CustomerService

pytestmark = pytest.mark.unit

VALID_CPF = "59860184275"
OTHER_CPF = "52998224725"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.cpf_taken.return_value = False
    repo.email_taken.return_value = False
    repo.has_orders.return_value = False
    repo.save.side_effect = lambda c: c
    return repo


@pytest.fixture()
def service(mock_repo):
    return CustomerService(repository=mock_repo)


def _make_customer(**overrides) -> Customer:
    defaults = {
        "id": 1,
        "name": "João Silva",
        "cpf": VALID_CPF,
        "email": "joao@example.com",
    }
    defaults.update(overrides)
    return Customer(**defaults)


def _create_dto(**overrides) -> CreateCustomerDTO:
    data = {"name": "João Silva", "email": "joao@example.com", "cpf": VALID_CPF}
    data.update(overrides)
    return CreateCustomerDTO(**data)


# ===========================================================================
# create_customer
# ===========================================================================


class TestCreateCustomer:
    def test_success(self, service, mock_repo):
        customer = service.create_customer(_create_dto(phone="11987654321"))

        assert customer.name == "João Silva"
        assert customer.cpf == VALID_CPF
        assert customer.email == "joao@example.com"
        assert customer.phone == "11987654321"
        mock_repo.save.assert_called_once()

    def test_duplicate_cpf_raises(self, service, mock_repo):
        mock_repo.cpf_taken.return_value = True

        with pytest.raises(CustomerAlreadyExists, match="CPF"):
            service.create_customer(_create_dto())
        mock_repo.save.assert_not_called()

    def test_duplicate_email_raises(self, service, mock_repo):
        mock_repo.email_taken.return_value = True

        with pytest.raises(CustomerAlreadyExists, match="[Ee]mail"):
            service.create_customer(_create_dto())
        mock_repo.save.assert_not_called()


# ===========================================================================
# update_customer
# ===========================================================================


class TestUpdateCustomer:
    def test_updates_only_supplied_fields(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_customer()

        customer = service.update_customer(1, UpdateCustomerDTO(name="João Pedro"))

        assert customer.name == "João Pedro"
        assert customer.email == "joao@example.com"
        assert customer.cpf == VALID_CPF
        mock_repo.save.assert_called_once()

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(CustomerNotFound):
            service.update_customer(99, UpdateCustomerDTO(name="Nobody Here"))

    def test_email_taken_by_other_customer_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_customer()
        mock_repo.email_taken.return_value = True

        with pytest.raises(CustomerAlreadyExists):
            service.update_customer(1, UpdateCustomerDTO(email="other@example.com"))
        mock_repo.email_taken.assert_called_once_with("other@example.com", exclude_id=1)
        mock_repo.save.assert_not_called()

    def test_cpf_taken_by_other_customer_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_customer()
        mock_repo.cpf_taken.return_value = True

        with pytest.raises(CustomerAlreadyExists):
            service.update_customer(1, UpdateCustomerDTO(cpf=OTHER_CPF))
        mock_repo.save.assert_not_called()


# ===========================================================================
# Queries
# ===========================================================================


class TestQueries:
    def test_get_customer(self, service, mock_repo):
        customer = _make_customer()
        mock_repo.get_by_id.return_value = customer

        assert service.get_customer(1) is customer
        mock_repo.get_by_id.assert_called_once_with(1)

    def test_get_customer_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(CustomerNotFound):
            service.get_customer(42)

    def test_list_customers(self, service, mock_repo):
        mock_repo.list.return_value = [_make_customer()]
        assert len(service.list_customers()) == 1

    def test_find_by_name_delegates(self, service, mock_repo):
        mock_repo.find_by_name.return_value = []
        assert service.find_by_name("silva") == []
        mock_repo.find_by_name.assert_called_once_with("silva")

    def test_count_customers(self, service, mock_repo):
        mock_repo.count.return_value = 7
        assert service.count_customers() == 7


# ===========================================================================
# delete_customer
# ===========================================================================


class TestDeleteCustomer:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_customer()

        service.delete_customer(1)

        mock_repo.delete.assert_called_once_with(1)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(CustomerNotFound):
            service.delete_customer(99)
        mock_repo.delete.assert_not_called()

    def test_customer_with_orders_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_customer()
        mock_repo.has_orders.return_value = True

        with pytest.raises(CustomerInUse):
            service.delete_customer(1)
        mock_repo.delete.assert_not_called()
