"""
URL configuration for the COGS app.
"""
from django.urls import path

from cogs.views import (
    UsageCostView,
    CostSheetView,
    PricingView,
    ProductionMixView,
)

urlpatterns = [
    path('usage-cost/', UsageCostView.as_view(), name='usage-cost'),
    path('cost-sheet/', CostSheetView.as_view(), name='cost-sheet'),
    path('pricing/', PricingView.as_view(), name='pricing'),
    path('production-mix/', ProductionMixView.as_view(), name='production-mix'),
]
