"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.

Business rules enforced here:
- Email and CPF must be unique (checked on create and update).
- Soft delete via repository, refused while live orders reference
  the customer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerInUse,
    CustomerNotFound,
)
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, dto: CreateCustomerDTO) -> Customer:
        """Create a new customer after enforcing uniqueness rules.

        Raises:
            CustomerAlreadyExists: if the CPF or the email is already taken.
        """
        log = logger.bind(email=dto.email)

        if self._repo.cpf_taken(dto.cpf):
            log.warning("customer.duplicate_cpf")
            raise CustomerAlreadyExists("CPF already registered.")

        if self._repo.email_taken(dto.email):
            log.warning("customer.duplicate_email")
            raise CustomerAlreadyExists("Email already registered.")

        customer = Customer(
            name=dto.name,
            email=dto.email,
            cpf=dto.cpf,
            phone=dto.phone,
        )
        customer = self._repo.save(customer)
        log.info("customer.created", customer_id=customer.id)
        return customer

    @transaction.atomic
    def update_customer(self, id: int, dto: UpdateCustomerDTO) -> Customer:
        """Update an existing customer with the supplied fields.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerAlreadyExists: if the new email or CPF collides.
        """
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")

        log = logger.bind(customer_id=id)

        if dto.email is not None and self._repo.email_taken(dto.email, exclude_id=id):
            log.warning("customer.duplicate_email")
            raise CustomerAlreadyExists("Email already registered.")

        if dto.cpf is not None and self._repo.cpf_taken(dto.cpf, exclude_id=id):
            log.warning("customer.duplicate_cpf")
            raise CustomerAlreadyExists("CPF already registered.")

        for field in ("name", "email", "cpf", "phone"):
            value = getattr(dto, field)
            if value is not None:
                setattr(customer, field, value)

        customer = self._repo.save(customer)
        log.info("customer.updated")
        return customer

    @transaction.atomic
    def delete_customer(self, id: int) -> None:
        """Soft-delete a customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerInUse: if a live order still references the customer.
        """
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")
        if self._repo.has_orders(id):
            logger.warning("customer.delete_refused", customer_id=id)
            raise CustomerInUse(f"Customer {id} has orders and cannot be deleted.")
        self._repo.delete(id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(self) -> List[Customer]:
        return self._repo.list()

    def get_customer(self, id: int) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")
        return customer

    def find_by_name(self, name: str) -> List[Customer]:
        return self._repo.find_by_name(name)

    def count_customers(self) -> int:
        return self._repo.count()
