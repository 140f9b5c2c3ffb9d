"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into appropriate
HTTP status codes; the view never swallows generic exceptions.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from modules.core.exceptions import error_response
from modules.core.viewsets import ServiceViewSet
from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerInUse,
    CustomerNotFound,
)
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerSerializer
from modules.customers.services import CustomerService

NOT_FOUND = "Customer not found"


class CustomerViewSet(ServiceViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    Pydantic validation errors propagate to the API exception handler
    (400).
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/customers/"""
        customers = self._service.list_customers()
        return Response(CustomerSerializer(customers, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/customers/{pk}/"""
        try:
            customer = self._service.get_customer(self.parse_id(pk))
        except CustomerNotFound as exc:
            return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND, str(exc))
        return Response(CustomerSerializer(customer).data)

    @action(detail=False, methods=["get"])
    def count(self, request: Request) -> Response:
        """GET /api/v1/customers/count/"""
        return Response({"count": self._service.count_customers()})

    @action(detail=False, methods=["get"], url_path=r"name/(?P<name>[^/]+)")
    def by_name(self, request: Request, name: str) -> Response:
        """GET /api/v1/customers/name/{name}/"""
        customers = self._service.find_by_name(name)
        return Response(CustomerSerializer(customers, many=True).data)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        data = self.payload(request)
        dto = CreateCustomerDTO(
            name=data.get("name", ""),
            email=data.get("email", ""),
            cpf=data.get("cpf", ""),
            phone=data.get("phone") or "",
        )

        try:
            customer = self._service.create_customer(dto)
        except CustomerAlreadyExists as exc:
            return error_response(
                status.HTTP_409_CONFLICT, "Customer already exists", str(exc)
            )

        return Response(
            CustomerSerializer(customer).data, status=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/customers/{pk}/ (only supplied fields change)"""
        customer_id = self.parse_id(pk)
        data = self.payload(request)
        dto = UpdateCustomerDTO(
            name=data.get("name"),
            email=data.get("email"),
            cpf=data.get("cpf"),
            phone=data.get("phone"),
        )

        try:
            customer = self._service.update_customer(customer_id, dto)
        except CustomerNotFound as exc:
            return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND, str(exc))
        except CustomerAlreadyExists as exc:
            return error_response(
                status.HTTP_409_CONFLICT, "Customer already exists", str(exc)
            )

        return Response(CustomerSerializer(customer).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/customers/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/customers/{pk}/"""
        try:
            self._service.delete_customer(self.parse_id(pk))
        except CustomerNotFound as exc:
            return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND, str(exc))
        except CustomerInUse as exc:
            return error_response(
                status.HTTP_409_CONFLICT, "Customer has orders", str(exc)
            )
        return Response(status=status.HTTP_204_NO_CONTENT)
