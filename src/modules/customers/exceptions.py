"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class CustomerAlreadyExists(Exception):
    """A customer with the same CPF or email already exists."""


class CustomerNotFound(Exception):
    """The requested customer does not exist or has been soft-deleted."""


class CustomerInUse(Exception):
    """The customer is still referenced by a live order and cannot be deleted."""
