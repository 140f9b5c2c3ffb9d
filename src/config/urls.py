from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)
from rest_framework.routers import DefaultRouter

from django.contrib import admin
from django.urls import include, path

from modules.customers.views import CustomerViewSet
from modules.orders.views import OrderViewSet
from modules.products.views import ProductViewSet

# One router for the versioned API; its root view lists the three resources.
api_router = DefaultRouter(trailing_slash=True)
api_router.register("customers", CustomerViewSet, basename="customer")
api_router.register("products", ProductViewSet, basename="product")
api_router.register("orders", OrderViewSet, basename="order")

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("modules.core.urls")),
    path("api/v1/", include(api_router.urls)),
    # OpenAPI schema & docs (public)
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
]
