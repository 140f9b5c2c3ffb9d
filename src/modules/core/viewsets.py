"""Shared base for the service-backed ViewSets."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rest_framework.exceptions import ParseError, ValidationError
from rest_framework.request import Request
from rest_framework.viewsets import ViewSet


class ServiceViewSet(ViewSet):
    """ViewSet that talks to an application service instead of the ORM.

    Subclasses build their service in ``__init__``.  Path identifiers are
    parsed with :meth:`parse_id` so a malformed id yields 400, while a
    well-formed id that does not resolve yields 404 from the service.
    """

    lookup_value_regex = r"[^/]+"

    @staticmethod
    def payload(request: Request) -> Mapping[str, Any]:
        """Return the JSON body as a dict; any other shape is a 400."""
        if not isinstance(request.data, Mapping):
            raise ParseError("Request body must be a JSON object.")
        return request.data

    @staticmethod
    def parse_id(value: str | None, field: str = "id") -> int:
        """Parse a positive integer identifier from a URL segment."""
        try:
            parsed = int(value) if value is not None else 0
        except (TypeError, ValueError):
            parsed = 0
        if parsed < 1:
            raise ValidationError({field: f"Invalid {field} parameter: {value!r}."})
        return parsed
