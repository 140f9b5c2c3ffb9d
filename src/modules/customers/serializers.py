"""Customer DRF serializers (output only).

Input is validated by the Pydantic DTOs in ``dtos.py``; these
serializers only render persisted customers.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    """Read serializer for the Customer resource."""

    class Meta:
        model = Customer
        fields = [
            "id",
            "name",
            "email",
            "cpf",
            "phone",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
