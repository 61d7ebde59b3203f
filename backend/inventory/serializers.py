from decimal import Decimal

from rest_framework import serializers

from inventory.models import InventoryItem
from inventory.records import DEFAULT_CATEGORY, DEFAULT_UNIT, InventoryItemData
from measurements.services import lookup


class InventoryItemSerializer(serializers.ModelSerializer):
    """
    Read/write serializer for inventory items.

    Unit spellings are normalised to the registry code ('gramas' -> 'g').
    """

    is_low_stock = serializers.BooleanField(read_only=True)
    quantity = serializers.DecimalField(max_digits=14, decimal_places=4, min_value=Decimal("0"))
    min_threshold = serializers.DecimalField(
        max_digits=14, decimal_places=4, min_value=Decimal("0"), required=False
    )
    category = serializers.CharField(max_length=100, required=False, allow_blank=True)
    unit = serializers.CharField(max_length=20, required=False, allow_blank=True)

    class Meta:
        model = InventoryItem
        fields = [
            "id",
            "name",
            "category",
            "quantity",
            "unit",
            "min_threshold",
            "is_low_stock",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_name(self, value):
        value = value.strip()
        if len(value) < 2:
            raise serializers.ValidationError("Name must have at least 2 characters.")
        return value

    def validate_category(self, value):
        return value.strip() or DEFAULT_CATEGORY

    def validate_unit(self, value):
        if not value or not value.strip():
            return DEFAULT_UNIT
        unit = lookup(value)
        if unit is None:
            raise serializers.ValidationError(f"Unknown unit '{value}'.")
        return unit.code

    def to_data(self) -> InventoryItemData:
        """Build a new snapshot from validated create data."""
        data = self.validated_data
        return InventoryItemData.create(
            name=data["name"],
            quantity=data["quantity"],
            unit=data.get("unit", DEFAULT_UNIT),
            category=data.get("category", DEFAULT_CATEGORY),
            min_threshold=data.get("min_threshold", Decimal("0")),
        )
