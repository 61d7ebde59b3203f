from rest_framework import serializers

from sales.cart import CartEntry, CartEntryKind, add_to_cart
from sales.models import Sale


class SaleSerializer(serializers.ModelSerializer):
    class Meta:
        model = Sale
        fields = ["id", "date", "customer_name", "description", "total_value", "created_at"]
        read_only_fields = fields


class ManualSaleSerializer(serializers.Serializer):
    """A sale typed in by hand, without a cart."""
    customer_name = serializers.CharField(max_length=200, allow_blank=True)
    description = serializers.CharField(allow_blank=True)
    total_value = serializers.CharField(allow_blank=True)
    date = serializers.DateTimeField(required=False, allow_null=True)


class CartEntrySerializer(serializers.Serializer):
    """
    Quantities and prices are checked by CartEntry.create so that bad values
    surface as ``invalid_quantity`` rather than generic field errors.
    """
    kind = serializers.ChoiceField(choices=CartEntryKind.choices)
    reference_id = serializers.CharField(max_length=64)
    quantity = serializers.CharField(allow_blank=True, allow_null=True, required=False)
    unit_price = serializers.CharField(allow_blank=True, allow_null=True, required=False)
    name = serializers.CharField(max_length=200, allow_blank=True, required=False, default="")


class FinalizeSaleSerializer(serializers.Serializer):
    customer_name = serializers.CharField(max_length=200, allow_blank=True)
    notes = serializers.CharField(allow_blank=True, required=False, default="")
    date = serializers.DateTimeField(required=False, allow_null=True)
    entries = CartEntrySerializer(many=True, allow_empty=True)

    def to_cart(self):
        """Build the cart; repeated products/items are merged into one entry."""
        cart = ()
        for entry in self.validated_data["entries"]:
            cart = add_to_cart(cart, CartEntry.create(
                kind=entry["kind"],
                reference_id=entry["reference_id"],
                quantity=entry.get("quantity"),
                unit_price=entry.get("unit_price"),
                name=entry.get("name", ""),
            ))
        return cart


class StockMovementSerializer(serializers.Serializer):
    inventory_item_id = serializers.CharField()
    requested = serializers.DecimalField(max_digits=None, decimal_places=4)
    deducted = serializers.DecimalField(max_digits=None, decimal_places=4)
    previous_quantity = serializers.DecimalField(max_digits=None, decimal_places=4)
    new_quantity = serializers.DecimalField(max_digits=None, decimal_places=4)
    was_clamped = serializers.BooleanField()


class SkippedReferenceSerializer(serializers.Serializer):
    kind = serializers.CharField()
    reference_id = serializers.CharField()


class SalesSummarySerializer(serializers.Serializer):
    total_revenue = serializers.DecimalField(max_digits=None, decimal_places=2)
    sales_count = serializers.IntegerField()
    last_sale_date = serializers.DateTimeField(allow_null=True)
    daily_totals = serializers.SerializerMethodField()

    def get_daily_totals(self, summary):
        return [{"date": day.isoformat(), "total": total} for day, total in summary.daily_totals]
