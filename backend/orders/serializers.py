from rest_framework import serializers

from orders.models import Order
from orders.records import OrderStatus


class OrderSerializer(serializers.ModelSerializer):
    """
    Business rules (description length, deadline, value) are enforced by
    OrderService; this serializer only checks types.
    """

    status_display = serializers.CharField(source="get_status_display", read_only=True)
    customer_name = serializers.CharField(max_length=200, allow_blank=True)
    description = serializers.CharField(allow_blank=True)
    deadline = serializers.DateTimeField(required=False, allow_null=True)
    estimated_value = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "customer_name",
            "description",
            "deadline",
            "status",
            "status_display",
            "estimated_value",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "status", "created_at", "updated_at"]

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["estimated_value"] = instance.estimated_value
        return data


class UpdateOrderStatusSerializer(serializers.Serializer):
    """
    Serializer specifically for validating and updating an order's status.
    """

    status = serializers.ChoiceField(choices=OrderStatus.choices)
