from django.urls import path, include
from rest_framework.routers import SimpleRouter

from sales.views import SaleViewSet

router = SimpleRouter()
router.register(r'', SaleViewSet, basename='sale')

app_name = "sales"

urlpatterns = [
    path('', include(router.urls)),
]
