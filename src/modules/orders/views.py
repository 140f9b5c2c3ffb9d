"""Order API views.

Exposes the ``OrderService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into appropriate
HTTP status codes; the view never swallows generic exceptions.

Business-rule failures during creation (inactive product, insufficient
stock) answer 500, as existing API clients expect.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from modules.core.exceptions import error_response
from modules.core.viewsets import ServiceViewSet
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.orders.dtos import CreateOrderDTO, UpdateOrderStatusDTO
from modules.orders.exceptions import (
    CustomerNotFound,
    InsufficientStock,
    InvalidStatus,
    OrderNotFound,
    ProductInactive,
    ProductNotFound,
)
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import OrderSerializer
from modules.orders.services import OrderService
from modules.products.repositories.django_repository import ProductDjangoRepository

NOT_FOUND = "Order not found"


class OrderViewSet(ServiceViewSet):
    """ViewSet for Order operations.

    Uses ``OrderService`` with injected repositories (DIP).  After
    creation only the status of an order can be changed.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            customer_repository=CustomerDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/orders/"""
        orders = self._service.list_orders()
        return Response(OrderSerializer(orders, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        try:
            order = self._service.get_order(self.parse_id(pk))
        except OrderNotFound as exc:
            return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND, str(exc))
        return Response(OrderSerializer(order).data)

    @action(detail=False, methods=["get"])
    def count(self, request: Request) -> Response:
        """GET /api/v1/orders/count/"""
        return Response({"count": self._service.count_orders()})

    @action(
        detail=False, methods=["get"], url_path=r"customer/(?P<customer_id>[^/]+)"
    )
    def by_customer(self, request: Request, customer_id: str) -> Response:
        """GET /api/v1/orders/customer/{customer_id}/"""
        orders = self._service.list_by_customer(
            self.parse_id(customer_id, field="customer_id")
        )
        return Response(OrderSerializer(orders, many=True).data)

    @action(detail=False, methods=["get"], url_path=r"status/(?P<status_value>[^/]+)")
    def by_status(self, request: Request, status_value: str) -> Response:
        """GET /api/v1/orders/status/{status}/"""
        orders = self._service.list_by_status(status_value)
        return Response(OrderSerializer(orders, many=True).data)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/"""
        data = self.payload(request)
        dto = CreateOrderDTO(
            customer_id=data.get("customer_id"),
            items=data.get("items") or [],
            status=data.get("status"),
        )

        try:
            order = self._service.create_order(dto)
        except CustomerNotFound as exc:
            return error_response(
                status.HTTP_404_NOT_FOUND, "Customer not found", str(exc)
            )
        except ProductNotFound as exc:
            return error_response(
                status.HTTP_404_NOT_FOUND, "Product not found", str(exc)
            )
        except (ProductInactive, InsufficientStock) as exc:
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Failed to create order",
                str(exc),
            )

        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/orders/{pk}/ with ``{"status": ...}``"""
        order_id = self.parse_id(pk)
        dto = UpdateOrderStatusDTO(status=self.payload(request).get("status"))

        try:
            order = self._service.update_status(order_id, dto)
        except InvalidStatus as exc:
            return error_response(status.HTTP_400_BAD_REQUEST, "Invalid status", str(exc))
        except OrderNotFound as exc:
            return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND, str(exc))

        return Response(OrderSerializer(order).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/orders/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/orders/{pk}/"""
        try:
            self._service.delete_order(self.parse_id(pk))
        except OrderNotFound as exc:
            return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND, str(exc))
        return Response(status=status.HTTP_204_NO_CONTENT)
