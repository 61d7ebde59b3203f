from core_backend.repositories import ScopedRepository
from products.models import Product, ProductRecipeItem


class ProductRepository(ScopedRepository):
    """Products with their recipes. Recipe lines are rewritten in order on save."""

    model = Product
    collection = "products"
    ordering = ("name",)

    def get_queryset(self, scope_id):
        return super().get_queryset(scope_id).prefetch_related("recipe_items")

    def to_snapshot(self, row):
        return row.to_data()

    def to_fields(self, snapshot):
        return {
            "name": snapshot.name,
            "price": snapshot.price,
            "description": snapshot.description,
        }

    def save_one(self, snapshot, scope_id):
        product = super().save_one(snapshot, scope_id)
        product.recipe_items.all().delete()
        ProductRecipeItem.objects.bulk_create([
            ProductRecipeItem(
                product=product,
                inventory_item_id=item.inventory_item_id,
                quantity=item.quantity,
                position=position,
            )
            for position, item in enumerate(snapshot.recipe)
        ])
        return product
