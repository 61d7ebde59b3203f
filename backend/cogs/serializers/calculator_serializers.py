"""
Calculator input serializers and result formatting.

Numeric fields are accepted as raw strings/numbers: missing, zero or
non-numeric values are not rejected here, the costing service reports them
as an invalid line instead.
"""
from decimal import Decimal, ROUND_HALF_UP

from rest_framework import serializers

from cogs.services import MaterialLine

CENT = Decimal("0.01")


def money(value):
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


class LenientNumberField(serializers.CharField):
    """Accepts numbers or numeric strings and passes them through untouched."""

    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        kwargs.setdefault("allow_null", True)
        kwargs.setdefault("allow_blank", True)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if isinstance(data, (int, float)) and not isinstance(data, bool):
            return data
        return super().to_internal_value(data)


class MaterialLineSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200, required=False, allow_blank=True, default="")
    purchase_price = LenientNumberField()
    purchase_quantity = LenientNumberField()
    purchase_unit = serializers.CharField(max_length=20)
    usage_quantity = LenientNumberField()
    usage_unit = serializers.CharField(max_length=20)

    def to_line(self, data=None) -> MaterialLine:
        data = data if data is not None else self.validated_data
        return MaterialLine(
            name=data.get("name", ""),
            purchase_price=data.get("purchase_price"),
            purchase_quantity=data.get("purchase_quantity"),
            purchase_unit=data["purchase_unit"],
            usage_quantity=data.get("usage_quantity"),
            usage_unit=data["usage_unit"],
        )


class CostSheetRequestSerializer(serializers.Serializer):
    lines = MaterialLineSerializer(many=True, allow_empty=True)
    margin_percent = serializers.DecimalField(max_digits=9, decimal_places=2, default=0)

    def to_lines(self):
        line_serializer = MaterialLineSerializer()
        return [line_serializer.to_line(line) for line in self.validated_data["lines"]]


class PricingRequestSerializer(serializers.Serializer):
    total_cost = serializers.DecimalField(max_digits=12, decimal_places=4)
    margin_percent = serializers.DecimalField(max_digits=9, decimal_places=2, default=0)


class ProductionMixRequestSerializer(serializers.Serializer):
    container_size = serializers.DecimalField(max_digits=10, decimal_places=2)
    fragrance_percent = serializers.DecimalField(max_digits=6, decimal_places=2, default=10)
    quantity = serializers.DecimalField(max_digits=10, decimal_places=2, default=1)


def material_result_data(result) -> dict:
    return {
        "name": result.name,
        "inventory_item_id": result.inventory_item_id,
        "is_valid": result.is_valid,
        "cost": result.cost_display,
        "error": result.error,
        "warnings": [str(warning) for warning in result.warnings],
    }


def cost_sheet_data(sheet) -> dict:
    return {
        "lines": [material_result_data(line) for line in sheet.lines],
        "total_cost": money(sheet.total_cost),
        "margin_percent": sheet.margin_percent,
        "selling_price": money(sheet.selling_price),
        "profit": money(sheet.profit),
        "is_complete": sheet.is_complete,
        "warnings": [str(warning) for warning in sheet.warnings],
    }
