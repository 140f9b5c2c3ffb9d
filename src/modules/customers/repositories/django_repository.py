"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Customer]:
        return Customer.objects.alive().filter(id=id).first()

    def list(self) -> List[Customer]:
        return list(Customer.objects.alive())

    def find_by_name(self, name: str) -> List[Customer]:
        return list(Customer.objects.alive().filter(name__icontains=name))

    def count(self) -> int:
        return Customer.objects.alive().count()

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer."""
        is_new = entity._state.adding
        entity.save()
        logger.info("customer.saved", customer_id=entity.id, is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Soft-delete a customer by ID.

        Returns ``True`` if the customer was found and soft-deleted,
        ``False`` if no live customer exists with the given ID.
        """
        customer = self.get_by_id(id)
        if not customer:
            return False
        customer.delete()
        logger.info("customer.soft_deleted", customer_id=id)
        return True

    def email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        return (
            Customer.objects.filter(email__iexact=email).exclude(id=exclude_id).exists()
        )

    def cpf_taken(self, cpf: str, exclude_id: Optional[int] = None) -> bool:
        return Customer.objects.filter(cpf=cpf).exclude(id=exclude_id).exists()

    def has_orders(self, id: int) -> bool:
        customer = Customer.objects.filter(id=id).first()
        if not customer:
            return False
        return customer.orders.alive().exists()
