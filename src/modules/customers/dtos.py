"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateCustomerDTO``: input for customer creation.
- ``UpdateCustomerDTO``: input for partial customer updates.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator
from validate_docbr import CPF

from modules.customers.models import sanitize_cpf

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
PHONE_MIN_LENGTH = 10
PHONE_MAX_LENGTH = 15


def _check_name(v: str) -> str:
    v = v.strip()
    if not NAME_MIN_LENGTH <= len(v) <= NAME_MAX_LENGTH:
        raise ValueError(
            f"Name must have between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters."
        )
    return v


def _check_cpf(v: str) -> str:
    v = sanitize_cpf(v)
    if len(v) != 11 or not CPF().validate(v):
        raise ValueError("Invalid CPF number.")
    return v


def _check_phone(v: str) -> str:
    v = v.strip()
    if v and not PHONE_MIN_LENGTH <= len(v) <= PHONE_MAX_LENGTH:
        raise ValueError(
            f"Phone must have between {PHONE_MIN_LENGTH} and {PHONE_MAX_LENGTH} characters."
        )
    return v


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation requests.

    ``cpf`` accepts formatted (``598.601.842-75``) or raw input and is
    stored as digits only.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: EmailStr
    cpf: str
    phone: str = ""

    @field_validator("name")
    @classmethod
    def name_length(cls, v: str) -> str:
        return _check_name(v)

    @field_validator("cpf")
    @classmethod
    def cpf_must_be_valid(cls, v: str) -> str:
        return _check_cpf(v)

    @field_validator("phone")
    @classmethod
    def phone_length(cls, v: str) -> str:
        return _check_phone(v)


class UpdateCustomerDTO(BaseModel):
    """Immutable DTO for customer update requests.

    All fields are optional; only supplied fields will be updated.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    email: EmailStr | None = None
    cpf: str | None = None
    phone: str | None = None

    @field_validator("name")
    @classmethod
    def name_length(cls, v: str | None) -> str | None:
        return _check_name(v) if v is not None else None

    @field_validator("cpf")
    @classmethod
    def cpf_must_be_valid(cls, v: str | None) -> str | None:
        return _check_cpf(v) if v is not None else None

    @field_validator("phone")
    @classmethod
    def phone_length(cls, v: str | None) -> str | None:
        return _check_phone(v) if v is not None else None
