"""
Unit views.
"""
from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated
from django_filters import rest_framework as filters

from measurements.models import Unit
from measurements.serializers import UnitSerializer


class UnitFilter(filters.FilterSet):
    category = filters.CharFilter(field_name='category')

    class Meta:
        model = Unit
        fields = ['category']


class UnitViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only list of measurement units.

    list: All units, filterable by category.
    retrieve: A single unit.
    """
    permission_classes = [IsAuthenticated]
    serializer_class = UnitSerializer
    filterset_class = UnitFilter
    queryset = Unit.objects.all()
    pagination_class = None
