"""
COGS Services.

- CostingService: material usage costing and cost sheets
- PricingService: totals, suggested price and profit
- compute_production_mix: wax/fragrance split for a batch
"""
from cogs.services.pricing_service import PricingService
from cogs.services.costing_service import (
    CostingService,
    CostSheet,
    MaterialLine,
    MaterialCostResult,
    compute_usage_cost,
    UNKNOWN_ITEM_NAME,
    require_unit,
    unit_mismatch_warning,
)
from cogs.services.production_service import ProductionMix, compute_production_mix

__all__ = [
    'CostingService',
    'CostSheet',
    'MaterialLine',
    'MaterialCostResult',
    'PricingService',
    'ProductionMix',
    'compute_production_mix',
    'compute_usage_cost',
    'UNKNOWN_ITEM_NAME',
    'require_unit',
    'unit_mismatch_warning',
]
