"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
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
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import (
    ProductAlreadyExists,
    ProductInUse,
    ProductNotFound,
)
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

NOT_FOUND = "Product not found"

_INPUT_FIELDS = (
    "name",
    "description",
    "price",
    "stock_quantity",
    "sku",
    "category",
    "is_active",
)


def _supplied(data) -> dict:
    return {field: data[field] for field in _INPUT_FIELDS if field in data}


class ProductViewSet(ServiceViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/products/"""
        products = self._service.list_products()
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        try:
            product = self._service.get_product(self.parse_id(pk))
        except ProductNotFound as exc:
            return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND, str(exc))
        return Response(ProductSerializer(product).data)

    @action(detail=False, methods=["get"])
    def count(self, request: Request) -> Response:
        """GET /api/v1/products/count/"""
        return Response({"count": self._service.count_products()})

    @action(detail=False, methods=["get"], url_path=r"name/(?P<name>[^/]+)")
    def by_name(self, request: Request, name: str) -> Response:
        """GET /api/v1/products/name/{name}/"""
        products = self._service.find_by_name(name)
        return Response(ProductSerializer(products, many=True).data)

    @action(detail=False, methods=["get"], url_path=r"category/(?P<category>[^/]+)")
    def by_category(self, request: Request, category: str) -> Response:
        """GET /api/v1/products/category/{category}/"""
        products = self._service.find_by_category(category)
        return Response(ProductSerializer(products, many=True).data)

    @action(detail=False, methods=["get"], url_path=r"sku/(?P<sku>[^/]+)")
    def by_sku(self, request: Request, sku: str) -> Response:
        """GET /api/v1/products/sku/{sku}/"""
        try:
            product = self._service.get_product_by_sku(sku)
        except ProductNotFound as exc:
            return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND, str(exc))
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        dto = CreateProductDTO(**_supplied(self.payload(request)))

        try:
            product = self._service.create_product(dto)
        except ProductAlreadyExists as exc:
            return error_response(
                status.HTTP_409_CONFLICT, "Product already exists", str(exc)
            )

        return Response(
            ProductSerializer(product).data, status=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}/ (only supplied fields change)"""
        product_id = self.parse_id(pk)
        dto = UpdateProductDTO(**_supplied(self.payload(request)))

        try:
            product = self._service.update_product(product_id, dto)
        except ProductNotFound as exc:
            return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND, str(exc))
        except ProductAlreadyExists as exc:
            return error_response(
                status.HTTP_409_CONFLICT, "Product already exists", str(exc)
            )

        return Response(ProductSerializer(product).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        try:
            self._service.delete_product(self.parse_id(pk))
        except ProductNotFound as exc:
            return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND, str(exc))
        except ProductInUse as exc:
            return error_response(
                status.HTTP_409_CONFLICT, "Product is part of an order", str(exc)
            )
        return Response(status=status.HTTP_204_NO_CONTENT)
