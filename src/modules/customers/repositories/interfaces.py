"""Customer repository interface.

Extends ``IRepository[Customer]`` with the look-ups required by the
uniqueness rules (email, CPF) and by the name search endpoint.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def find_by_name(self, name: str) -> List[Customer]:
        """Case-insensitive substring search on ``name``."""

    @abstractmethod
    def email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """Whether any customer (deleted ones included) uses ``email``."""

    @abstractmethod
    def cpf_taken(self, cpf: str, exclude_id: Optional[int] = None) -> bool:
        """Whether any customer (deleted ones included) uses ``cpf``."""

    @abstractmethod
    def has_orders(self, id: int) -> bool:
        """Whether a live order still references the customer."""
