from django.db import models
from django.utils.translation import gettext_lazy as _

from core_backend.base.models import ScopedModel
from products.records import ProductData, RecipeItemData


class Product(ScopedModel):
    """
    A sellable finished good, e.g. 'Vela Lavanda 200g'.

    Its recipe lists the inventory items consumed per unit sold.
    """

    name = models.CharField(max_length=200, help_text=_("Name of the product."))
    description = models.TextField(
        blank=True, help_text=_("Detailed description of the product.")
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text=_("The selling price of the product."),
    )

    class Meta:
        verbose_name = _("Product")
        verbose_name_plural = _("Products")
        ordering = ["name"]
        indexes = [
            models.Index(fields=["owner", "name"], name="product_owner_name_idx"),
        ]

    def __str__(self):
        return self.name

    def to_data(self) -> ProductData:
        return ProductData(
            id=str(self.id),
            name=self.name,
            price=self.price,
            description=self.description,
            recipe=tuple(item.to_data() for item in self.recipe_items.all()),
        )


class ProductRecipeItem(models.Model):
    """
    An ingredient line of a product's recipe.

    ``inventory_item_id`` is a plain id, not a foreign key: deleting an
    inventory item leaves the line in place and it is shown as an unknown
    item until the recipe is edited.
    """

    product = models.ForeignKey(
        Product, on_delete=models.CASCADE, related_name="recipe_items"
    )
    inventory_item_id = models.UUIDField(
        help_text=_("Inventory item consumed by this line.")
    )
    quantity = models.DecimalField(
        max_digits=12,
        decimal_places=4,
        help_text=_("Quantity consumed per unit sold, in the inventory item's unit."),
    )
    position = models.PositiveIntegerField(
        default=0, help_text=_("Display order within the recipe.")
    )

    class Meta:
        verbose_name = _("Recipe Item")
        verbose_name_plural = _("Recipe Items")
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(
                fields=["product", "inventory_item_id"],
                name="unique_recipe_ingredient",
            ),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.inventory_item_id} for {self.product}"

    def to_data(self) -> RecipeItemData:
        return RecipeItemData(
            inventory_item_id=str(self.inventory_item_id),
            quantity=self.quantity,
        )
