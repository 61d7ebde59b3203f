import logging

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from core_backend.base.viewsets import ScopedViewSet
from orders.filters import OrderFilter
from orders.models import Order
from orders.serializers import OrderSerializer, UpdateOrderStatusSerializer
from orders.services import OrderManager

logger = logging.getLogger(__name__)


class OrderViewSet(ScopedViewSet):
    """
    Custom orders, soonest deadline first.

    Filter with ``?status=PENDING`` (or IN_PROGRESS, COMPLETED, DELIVERED).
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    filterset_class = OrderFilter
    search_fields = ["customer_name", "description"]
    ordering_fields = ["deadline", "created_at", "estimated_value"]
    ordering = ["deadline"]

    def create(self, request: Request, *args, **kwargs) -> Response:
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = OrderManager().create(request.user.pk, **serializer.validated_data)
        instance = self.get_queryset().get(pk=order.id)
        return Response(self.get_serializer(instance).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, *args, **kwargs) -> Response:
        partial = kwargs.pop("partial", False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        order = OrderManager().update(request.user.pk, instance.pk, **serializer.validated_data)
        return Response(self.get_serializer(self.get_queryset().get(pk=order.id)).data)

    @action(detail=True, methods=["post"], url_path="status")
    def update_status(self, request: Request, pk=None) -> Response:
        instance = self.get_object()
        serializer = UpdateOrderStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = OrderManager().set_status(
            request.user.pk, instance.pk, serializer.validated_data["status"]
        )
        return Response(self.get_serializer(self.get_queryset().get(pk=order.id)).data)
