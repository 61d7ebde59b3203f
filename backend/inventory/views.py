import logging

from django_filters import rest_framework as filters
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from core_backend.base.viewsets import ScopedViewSet
from inventory.models import InventoryItem
from inventory.repositories import InventoryRepository
from inventory.serializers import InventoryItemSerializer
from inventory.services import InventoryService

logger = logging.getLogger(__name__)


class InventoryItemFilter(filters.FilterSet):
    category = filters.CharFilter(field_name="category", lookup_expr="iexact")

    class Meta:
        model = InventoryItem
        fields = ["category", "unit"]


class InventoryItemViewSet(ScopedViewSet):
    """
    CRUD for the account's inventory items.

    create: adds the item, or merges its quantity into an existing item
        with the same name (case-insensitive) and category. Responds 201 for
        a new item and 200 with ``merged: true`` when merged.
    destroy: removes the item; recipe lines that used it become unknown items.
    low_stock: items at or below their threshold.
    """

    queryset = InventoryItem.objects.all()
    serializer_class = InventoryItemSerializer
    filterset_class = InventoryItemFilter
    search_fields = ["name", "category"]
    ordering_fields = ["name", "category", "quantity", "created_at"]
    ordering = ["name"]
    pagination_class = None

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        repository = InventoryRepository()
        scope_id = request.user.pk
        items = repository.load_all(scope_id)

        items, item, merged = InventoryService.add_or_merge(items, serializer.to_data())
        repository.save_all(items, scope_id)

        instance = self.get_queryset().get(pk=item.id)
        data = dict(self.get_serializer(instance).data)
        data["merged"] = merged

        return Response(data, status=status.HTTP_200_OK if merged else status.HTTP_201_CREATED)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()

        repository = InventoryRepository()
        items = InventoryService.remove_item(repository.load_all(request.user.pk), instance.pk)
        repository.save_all(items, request.user.pk)

        logger.info(f"Inventory item {instance.pk} ('{instance.name}') removed")
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["get"], url_path="low-stock")
    def low_stock(self, request):
        items = InventoryService.low_stock_items(self.filter_queryset(self.get_queryset()))
        serializer = self.get_serializer(items, many=True)
        return Response(serializer.data)
