"""
Calculator endpoints.

All of these are stateless: they compute and return, nothing is saved.
"""
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from cogs.serializers import (
    MaterialLineSerializer,
    CostSheetRequestSerializer,
    PricingRequestSerializer,
    ProductionMixRequestSerializer,
    material_result_data,
    cost_sheet_data,
)
from cogs.serializers.calculator_serializers import money
from cogs.services import CostingService, PricingService, compute_production_mix


class UsageCostView(APIView):
    """
    POST: cost of one material usage.

    Invalid inputs (missing/zero/non-numeric values, unknown units) return
    400 with the reason. Unit-group mismatches return 200 with warnings.
    """
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = MaterialLineSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = CostingService.cost_material(serializer.to_line())
        data = material_result_data(result)

        if not result.is_valid:
            return Response(
                {"code": "invalid_cost_input", "detail": result.error, **data},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response(data)


class CostSheetView(APIView):
    """POST: cost several materials and derive a suggested price."""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = CostSheetRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        sheet = CostingService.build_cost_sheet(
            serializer.to_lines(),
            serializer.validated_data["margin_percent"],
        )
        return Response(cost_sheet_data(sheet))


class PricingView(APIView):
    """POST: suggested selling price and profit for a total cost and margin."""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = PricingRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        total_cost = serializer.validated_data["total_cost"]
        margin_percent = serializer.validated_data["margin_percent"]
        price = PricingService.selling_price(total_cost, margin_percent)

        return Response({
            "total_cost": total_cost,
            "margin_percent": margin_percent,
            "selling_price": money(price),
            "profit": money(PricingService.profit(price, total_cost)),
        })


class ProductionMixView(APIView):
    """POST: wax and fragrance needed for a batch of containers."""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = ProductionMixRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        mix = compute_production_mix(**serializer.validated_data).rounded()
        return Response({
            "total_mix": mix.total_mix,
            "wax_amount": mix.wax_amount,
            "fragrance_amount": mix.fragrance_amount,
        })
