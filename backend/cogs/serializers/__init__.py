"""
COGS calculator serializers.
"""
from cogs.serializers.calculator_serializers import (
    MaterialLineSerializer,
    CostSheetRequestSerializer,
    PricingRequestSerializer,
    ProductionMixRequestSerializer,
    material_result_data,
    cost_sheet_data,
)

__all__ = [
    'MaterialLineSerializer',
    'CostSheetRequestSerializer',
    'PricingRequestSerializer',
    'ProductionMixRequestSerializer',
    'material_result_data',
    'cost_sheet_data',
]
