"""
Immutable product snapshots used by the domain services.
"""
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Tuple

from core_backend.base.models import new_id


@dataclass(frozen=True)
class RecipeItemData:
    """
    One line of a product's bill of materials.

    ``quantity`` is the amount of the inventory item, in the item's own unit,
    consumed per unit of product sold.
    """
    inventory_item_id: str
    quantity: Decimal


Recipe = Tuple[RecipeItemData, ...]


@dataclass(frozen=True)
class ProductData:
    id: str
    name: str
    price: Decimal
    recipe: Recipe = field(default_factory=tuple)
    description: str = ""

    def with_recipe(self, recipe) -> "ProductData":
        return replace(self, recipe=tuple(recipe))

    @classmethod
    def create(cls, name, price, recipe=(), description=""):
        return cls(
            id=new_id(),
            name=name,
            price=Decimal(str(price)),
            recipe=tuple(recipe),
            description=description or "",
        )
