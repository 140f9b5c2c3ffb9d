"""Customer model with unique CPF and soft delete.

Business rules implemented:
- Email must be unique in the system.
- CPF (national id) must be unique (check digits are validated by the DTO).
- Soft delete via ``deleted_at`` (inherited from SoftDeleteModel).
- CPF is masked in ``__str__`` so it never leaks into logs.
"""

from __future__ import annotations

import re

from django.db import models

from modules.core.models import SoftDeleteModel


def sanitize_cpf(value: str) -> str:
    """Strip all non-digit characters from a CPF string."""
    return re.sub(r"\D", "", value)


class Customer(SoftDeleteModel):
    """Customer referenced by orders.

    ``cpf`` stores only digits.  ``unique=True`` on ``cpf`` and ``email``
    applies regardless of soft-delete state: a national id is never reused.
    """

    name = models.CharField(max_length=100)
    email = models.EmailField(max_length=100, unique=True)
    cpf = models.CharField(max_length=11, unique=True)
    phone = models.CharField(max_length=15, blank=True, default="")

    class Meta:
        db_table = "customers"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["name"], name="customers_name_idx"),
        ]

    def save(self, *args, **kwargs) -> None:
        if self.cpf:
            self.cpf = sanitize_cpf(self.cpf)
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        suffix = self.cpf[-4:] if self.cpf else "????"
        return f"{self.name} (CPF: ***{suffix})"
