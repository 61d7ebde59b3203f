"""
Recipe composition and recipe-based estimates.

Recipes are tuples of RecipeItemData; every operation returns a new tuple
and leaves its input untouched, so a rejected edit leaves the draft exactly
as it was.
"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional

from cogs.services import CostingService, UNKNOWN_ITEM_NAME
from core_backend.exceptions import DanglingReference, InvalidQuantity
from core_backend.utils.numbers import to_decimal, to_positive_decimal
from products.exceptions import DuplicateIngredient
from products.records import RecipeItemData

logger = logging.getLogger(__name__)


def add_ingredient(recipe, inventory_item_id, quantity):
    """
    Append an ingredient to the recipe.

    Raises:
        InvalidQuantity: quantity is missing, zero, negative or not a number.
        DuplicateIngredient: the inventory item is already in the recipe.
    """
    amount = to_positive_decimal(quantity)
    if amount is None:
        raise InvalidQuantity(quantity)

    inventory_item_id = str(inventory_item_id)
    recipe = tuple(recipe)
    if any(item.inventory_item_id == inventory_item_id for item in recipe):
        raise DuplicateIngredient(inventory_item_id)

    return recipe + (RecipeItemData(inventory_item_id=inventory_item_id, quantity=amount),)


def remove_ingredient(recipe, inventory_item_id):
    inventory_item_id = str(inventory_item_id)
    return tuple(item for item in recipe if item.inventory_item_id != inventory_item_id)


def build_recipe(lines):
    """
    Build a recipe from (inventory_item_id, quantity) pairs, applying the
    same checks as ``add_ingredient`` to every line.
    """
    recipe = ()
    for inventory_item_id, quantity in lines:
        recipe = add_ingredient(recipe, inventory_item_id, quantity)
    return recipe


@dataclass(frozen=True)
class RecipeLineView:
    """A recipe line resolved against the inventory for display."""
    inventory_item_id: str
    name: str
    quantity: Decimal
    unit: Optional[str]
    is_dangling: bool = False


def describe_recipe(recipe, inventory) -> List[RecipeLineView]:
    """
    Resolve recipe lines to item names and units, in recipe order.

    Lines pointing at items that no longer exist are shown as
    "Item desconhecido".
    """
    items_by_id = {item.id: item for item in inventory}
    lines = []
    for recipe_item in recipe:
        item = items_by_id.get(recipe_item.inventory_item_id)
        if item is None:
            lines.append(RecipeLineView(
                inventory_item_id=recipe_item.inventory_item_id,
                name=UNKNOWN_ITEM_NAME,
                quantity=recipe_item.quantity,
                unit=None,
                is_dangling=True,
            ))
            continue
        lines.append(RecipeLineView(
            inventory_item_id=item.id,
            name=item.name,
            quantity=recipe_item.quantity,
            unit=item.unit,
        ))
    return lines


@dataclass
class RecipeCostEstimate:
    total_cost: Decimal = Decimal("0")
    missing_costs: List[str] = field(default_factory=list)
    dangling: List[DanglingReference] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.missing_costs and not self.dangling


class ProductService:

    @staticmethod
    def estimate_recipe_cost(product, inventory, unit_costs: Dict[str, object]) -> RecipeCostEstimate:
        """
        Material cost of one unit of ``product``.

        Args:
            unit_costs: inventory item id -> cost of one unit of that item,
                in the item's own unit (e.g. R$ per gram for an item kept in g).

        Lines without a known cost, or pointing at deleted items, are left out
        of the total and reported.
        """
        items_by_id = {item.id: item for item in inventory}
        estimate = RecipeCostEstimate()

        for recipe_item in product.recipe:
            if recipe_item.inventory_item_id not in items_by_id:
                estimate.dangling.append(
                    DanglingReference("inventory_item", recipe_item.inventory_item_id, product.id)
                )
                continue

            unit_cost = to_decimal(unit_costs.get(recipe_item.inventory_item_id))
            if unit_cost is None or unit_cost < 0:
                estimate.missing_costs.append(recipe_item.inventory_item_id)
                continue

            estimate.total_cost += unit_cost * recipe_item.quantity

        if not estimate.is_complete:
            logger.debug(
                f"Incomplete cost estimate for '{product.name}': "
                f"{len(estimate.missing_costs)} without cost, {len(estimate.dangling)} dangling"
            )
        return estimate

    @staticmethod
    def recipe_cost_sheet(product, inventory, purchases, margin_percent=0):
        """Cost sheet for a product's recipe from the last purchase of each item."""
        lines = CostingService.recipe_material_lines(product, inventory, purchases)
        return CostingService.build_cost_sheet(lines, margin_percent)
