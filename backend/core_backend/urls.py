"""
URL configuration for core_backend project.
"""

from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView


def health_check(request):
    """Simple health check endpoint that doesn't require authentication"""
    return JsonResponse({"status": "ok", "message": "Backend is running"})


urlpatterns = [
    path("api/health/", health_check, name="health_check"),
    path("admin/", admin.site.urls),
    path("api/auth/token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("api/auth/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    path("api/measurements/", include("measurements.urls")),
    path("api/cogs/", include("cogs.urls")),
    path("api/inventory/", include("inventory.urls")),
    path("api/products/", include("products.urls")),
    path("api/sales/", include("sales.urls")),
    path("api/orders/", include("orders.urls")),
    path("api/assistant/", include("assistant.urls")),
]
