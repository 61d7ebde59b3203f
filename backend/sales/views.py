import logging

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from core_backend.base.viewsets import ScopedViewSet
from sales.models import Sale
from sales.serializers import (
    SaleSerializer,
    ManualSaleSerializer,
    FinalizeSaleSerializer,
    StockMovementSerializer,
    SkippedReferenceSerializer,
    SalesSummarySerializer,
)
from sales.services import SaleService

logger = logging.getLogger(__name__)


class SaleViewSet(ScopedViewSet):
    """
    Sales history, newest first.

    create: register a sale by hand (no stock change).
    finalize: turn a cart into a sale and deduct stock.
    summary: revenue, count, last sale and daily totals.

    Sales are not editable once recorded.
    """

    queryset = Sale.objects.all()
    serializer_class = SaleSerializer
    http_method_names = ["get", "post", "delete", "head", "options"]
    search_fields = ["customer_name", "description"]
    ordering_fields = ["date", "total_value"]
    ordering = ["-date", "-created_at"]

    def create(self, request, *args, **kwargs):
        serializer = ManualSaleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        sale = SaleService().register_sale(request.user.pk, **serializer.validated_data)
        instance = self.get_queryset().get(pk=sale.id)
        return Response(SaleSerializer(instance).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=["post"])
    def finalize(self, request):
        serializer = FinalizeSaleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = SaleService().finalize_sale(
            request.user.pk,
            serializer.validated_data["customer_name"],
            serializer.to_cart(),
            notes=serializer.validated_data.get("notes", ""),
            date=serializer.validated_data.get("date"),
        )
        instance = self.get_queryset().get(pk=result.sale.id)
        return Response(
            {
                "sale": SaleSerializer(instance).data,
                "movements": StockMovementSerializer(result.deduction.movements, many=True).data,
                "skipped": SkippedReferenceSerializer(result.deduction.skipped, many=True).data,
            },
            status=status.HTTP_201_CREATED,
        )

    @action(detail=False, methods=["get"])
    def summary(self, request):
        days = request.query_params.get("days")
        summary = SaleService().summary(
            request.user.pk, int(days) if days and days.isdigit() else None
        )
        return Response(SalesSummarySerializer(summary).data)
