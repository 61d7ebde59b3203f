"""
COGS calculator views.
"""
from cogs.views.calculator_views import (
    UsageCostView,
    CostSheetView,
    PricingView,
    ProductionMixView,
)

__all__ = [
    'UsageCostView',
    'CostSheetView',
    'PricingView',
    'ProductionMixView',
]
