import logging

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from cogs.serializers import cost_sheet_data
from cogs.serializers.calculator_serializers import money
from core_backend.base.viewsets import ScopedViewSet
from inventory.repositories import InventoryRepository
from products.models import Product
from products.repositories import ProductRepository
from products.serializers import (
    ProductSerializer,
    IngredientSerializer,
    RemoveIngredientSerializer,
    RecipeLineSerializer,
    RecipeCostSheetRequestSerializer,
    RecipeCostEstimateRequestSerializer,
)
from products import services as recipes
from products.services import ProductService

logger = logging.getLogger(__name__)


class ProductViewSet(ScopedViewSet):
    """
    Product catalogue with recipes.

    Writes go through ProductRepository so the recipe lines are stored in
    the order they were composed.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    search_fields = ["name", "description"]
    ordering_fields = ["name", "price", "created_at"]
    ordering = ["name"]
    pagination_class = None

    def get_queryset(self):
        return super().get_queryset().prefetch_related("recipe_items")

    def _save(self, snapshot):
        ProductRepository().save_all(self._replace(snapshot), self.request.user.pk)
        return self.get_queryset().get(pk=snapshot.id)

    def _replace(self, snapshot):
        products = ProductRepository().load_all(self.request.user.pk)
        others = [product for product in products if product.id != snapshot.id]
        return others + [snapshot]

    def _product_data(self):
        return self.get_object().to_data()

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        instance = self._save(serializer.to_data())
        return Response(self.get_serializer(instance).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        existing = self._product_data()
        serializer = self.get_serializer(self.get_object(), data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        instance = self._save(serializer.to_data(existing))
        return Response(self.get_serializer(instance).data)

    @action(detail=True, methods=["get"])
    def recipe(self, request, pk=None):
        """Recipe lines resolved to inventory item names and units."""
        product = self._product_data()
        inventory = InventoryRepository().load_all(request.user.pk)
        lines = recipes.describe_recipe(product.recipe, inventory)
        return Response(RecipeLineSerializer(lines, many=True).data)

    @action(detail=True, methods=["post"], url_path="add-ingredient")
    def add_ingredient(self, request, pk=None):
        serializer = IngredientSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = self._product_data()
        recipe = recipes.add_ingredient(
            product.recipe,
            serializer.validated_data["inventory_item_id"],
            serializer.validated_data.get("quantity"),
        )
        instance = self._save(product.with_recipe(recipe))
        return Response(self.get_serializer(instance).data)

    @action(detail=True, methods=["post"], url_path="remove-ingredient")
    def remove_ingredient(self, request, pk=None):
        serializer = RemoveIngredientSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = self._product_data()
        recipe = recipes.remove_ingredient(product.recipe, serializer.validated_data["inventory_item_id"])
        instance = self._save(product.with_recipe(recipe))
        return Response(self.get_serializer(instance).data)

    @action(detail=True, methods=["post"], url_path="cost-sheet")
    def cost_sheet(self, request, pk=None):
        """Cost sheet of the recipe from the last purchase price of each item."""
        serializer = RecipeCostSheetRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = self._product_data()
        inventory = InventoryRepository().load_all(request.user.pk)
        sheet = ProductService.recipe_cost_sheet(
            product,
            inventory,
            serializer.purchases_by_item(),
            serializer.validated_data["margin_percent"],
        )
        return Response(cost_sheet_data(sheet))

    @action(detail=True, methods=["post"], url_path="cost-estimate")
    def cost_estimate(self, request, pk=None):
        """Material cost of one unit from per-item unit costs."""
        serializer = RecipeCostEstimateRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = self._product_data()
        inventory = InventoryRepository().load_all(request.user.pk)
        estimate = ProductService.estimate_recipe_cost(
            product, inventory, serializer.validated_data["unit_costs"]
        )
        return Response({
            "total_cost": money(estimate.total_cost),
            "is_complete": estimate.is_complete,
            "missing_costs": estimate.missing_costs,
            "unknown_items": [reference.reference_id for reference in estimate.dangling],
        })
