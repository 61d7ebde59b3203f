from decimal import Decimal

from rest_framework import serializers

from cogs.serializers.calculator_serializers import LenientNumberField
from products.models import Product, ProductRecipeItem
from products.records import ProductData
from products.services import build_recipe


class ProductRecipeItemSerializer(serializers.ModelSerializer):
    inventory_item_id = serializers.UUIDField()
    quantity = serializers.DecimalField(max_digits=12, decimal_places=4)

    class Meta:
        model = ProductRecipeItem
        fields = ["inventory_item_id", "quantity"]


class ProductSerializer(serializers.ModelSerializer):
    """
    Product with its recipe, in recipe order.

    On write, ``recipe`` replaces the whole recipe; duplicate or non-positive
    lines are rejected by the recipe composer.
    """

    recipe = ProductRecipeItemSerializer(source="recipe_items", many=True, required=False)
    price = serializers.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        model = Product
        fields = ["id", "name", "description", "price", "recipe", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_name(self, value):
        value = value.strip()
        if len(value) < 2:
            raise serializers.ValidationError("Name must have at least 2 characters.")
        return value

    def validate_price(self, value):
        if value <= 0:
            raise serializers.ValidationError("Price must be greater than zero.")
        return value

    def to_data(self, existing: ProductData = None) -> ProductData:
        """
        Build the snapshot to save from validated data.

        Fields missing from a partial update keep their current values.
        """
        data = self.validated_data
        if existing is None:
            return ProductData.create(
                name=data["name"],
                price=data["price"],
                description=data.get("description", ""),
                recipe=self._recipe(data.get("recipe_items", [])),
            )

        recipe = existing.recipe
        if "recipe_items" in data:
            recipe = self._recipe(data["recipe_items"])

        return ProductData(
            id=existing.id,
            name=data.get("name", existing.name),
            price=data.get("price", existing.price),
            description=data.get("description", existing.description),
            recipe=recipe,
        )

    @staticmethod
    def _recipe(lines):
        return build_recipe((line["inventory_item_id"], line["quantity"]) for line in lines)


class IngredientSerializer(serializers.Serializer):
    inventory_item_id = serializers.UUIDField()
    quantity = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class RemoveIngredientSerializer(serializers.Serializer):
    inventory_item_id = serializers.UUIDField()


class RecipeLineSerializer(serializers.Serializer):
    inventory_item_id = serializers.CharField()
    name = serializers.CharField()
    quantity = serializers.DecimalField(max_digits=12, decimal_places=4)
    unit = serializers.CharField(allow_null=True)
    is_dangling = serializers.BooleanField()


class PurchaseSerializer(serializers.Serializer):
    """Last purchase of an inventory item, used to cost recipe lines."""
    inventory_item_id = serializers.UUIDField()
    price = LenientNumberField()
    quantity = LenientNumberField()
    unit = serializers.CharField(max_length=20, required=False, allow_blank=True)


class RecipeCostSheetRequestSerializer(serializers.Serializer):
    purchases = PurchaseSerializer(many=True, allow_empty=True)
    margin_percent = serializers.DecimalField(max_digits=9, decimal_places=2, default=Decimal("0"))

    def purchases_by_item(self):
        return {
            str(purchase["inventory_item_id"]): {
                "price": purchase.get("price"),
                "quantity": purchase.get("quantity"),
                "unit": purchase.get("unit") or None,
            }
            for purchase in self.validated_data["purchases"]
        }


class RecipeCostEstimateRequestSerializer(serializers.Serializer):
    unit_costs = serializers.DictField(
        child=serializers.DecimalField(max_digits=14, decimal_places=6, min_value=Decimal("0"))
    )
