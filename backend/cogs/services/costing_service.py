"""
Costing service for COGS.

Computes what a recipe usage of a material costs, given how the material was
bought. Both quantities are normalised to the base unit of their group:

    price_per_base = purchase_price / (purchase_qty * purchase_factor)
    cost           = price_per_base * (usage_qty * usage_factor)

Mixing unit groups (buying in kg, using in ml) still produces a number; the
result carries a UnitMismatchWarning instead of being rejected, since no
density data exists.
"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Union

from core_backend.utils.numbers import to_decimal, to_positive_decimal
from measurements.services.registry import UnitDefinition, lookup
from cogs.exceptions import UnitMismatchWarning, UnknownUnit
from cogs.services.pricing_service import PricingService

logger = logging.getLogger(__name__)

UNKNOWN_ITEM_NAME = "Item desconhecido"

UnitLike = Union[UnitDefinition, str, None]


def resolve_unit(unit: UnitLike) -> Optional[UnitDefinition]:
    """Accept a UnitDefinition or a symbol; unknown symbols resolve to None."""
    if isinstance(unit, UnitDefinition):
        return unit
    if not unit:
        return None
    return lookup(unit)


def require_unit(unit: UnitLike) -> UnitDefinition:
    """Like ``resolve_unit`` but raises UnknownUnit instead of returning None."""
    definition = resolve_unit(unit)
    if definition is None:
        raise UnknownUnit(unit)
    return definition


def unit_mismatch_warning(purchase_unit: UnitDefinition, usage_unit: UnitDefinition) -> Optional[UnitMismatchWarning]:
    """Return an advisory when the two units belong to different groups."""
    if purchase_unit.group == usage_unit.group:
        return None
    return UnitMismatchWarning(purchase_unit, usage_unit)


def compute_usage_cost(
    purchase_price,
    purchase_qty,
    purchase_unit: UnitLike,
    usage_qty,
    usage_unit: UnitLike,
) -> Optional[Decimal]:
    """
    Cost of using ``usage_qty`` ``usage_unit`` of a material bought as
    ``purchase_qty`` ``purchase_unit`` for ``purchase_price``.

    Returns None (invalid) when a price or quantity is missing, zero,
    negative or not a number, or when a unit is unknown. Cross-group units
    are not rejected; see ``unit_mismatch_warning``.

    Example:
        compute_usage_cost(50, 1, "kg", 90, "g") == Decimal("4.5")
    """
    price = to_positive_decimal(purchase_price)
    bought = to_positive_decimal(purchase_qty)
    used = to_positive_decimal(usage_qty)
    if price is None or bought is None or used is None:
        return None

    purchase_unit = resolve_unit(purchase_unit)
    usage_unit = resolve_unit(usage_unit)
    if purchase_unit is None or usage_unit is None:
        return None

    total_base = purchase_unit.to_base(bought)
    price_per_base = price / total_base
    used_base = usage_unit.to_base(used)
    return price_per_base * used_base


@dataclass(frozen=True)
class MaterialLine:
    """One material used by a product: how it is bought and how much is used."""
    name: str
    purchase_price: object
    purchase_quantity: object
    purchase_unit: UnitLike
    usage_quantity: object
    usage_unit: UnitLike
    inventory_item_id: Optional[str] = None


@dataclass
class MaterialCostResult:
    """Result of costing a single material line."""
    name: str
    cost: Optional[Decimal]
    is_valid: bool
    inventory_item_id: Optional[str] = None
    warnings: List[UnitMismatchWarning] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def cost_display(self) -> Optional[Decimal]:
        if self.cost is None:
            return None
        return self.cost.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


@dataclass
class CostSheet:
    """Cost breakdown of a set of materials plus a margin."""
    lines: List[MaterialCostResult]
    total_cost: Decimal
    margin_percent: Decimal
    selling_price: Decimal
    profit: Decimal
    is_complete: bool = True

    @property
    def warnings(self) -> List[UnitMismatchWarning]:
        return [warning for line in self.lines for warning in line.warnings]

    @property
    def invalid_lines(self) -> List[MaterialCostResult]:
        return [line for line in self.lines if not line.is_valid]


class CostingService:
    """
    Service for costing material usage and building cost sheets.

    Everything here is a pure computation; nothing is persisted.
    """

    @staticmethod
    def cost_material(line: MaterialLine) -> MaterialCostResult:
        """
        Cost a single material line.

        Unknown units and invalid numbers produce an invalid result with an
        error message. Unit-group mismatches produce a valid result with a
        warning attached.
        """
        result = MaterialCostResult(
            name=line.name,
            cost=None,
            is_valid=False,
            inventory_item_id=line.inventory_item_id,
        )

        try:
            purchase_unit = require_unit(line.purchase_unit)
            usage_unit = require_unit(line.usage_unit)
        except UnknownUnit as e:
            result.error = e.message
            return result

        cost = compute_usage_cost(
            line.purchase_price,
            line.purchase_quantity,
            purchase_unit,
            line.usage_quantity,
            usage_unit,
        )
        if cost is None:
            result.error = "Price and quantities must be numbers greater than zero"
            return result

        warning = unit_mismatch_warning(purchase_unit, usage_unit)
        if warning is not None:
            logger.warning(f"Unit mismatch costing '{line.name}': {warning}")
            result.warnings.append(warning)

        result.cost = cost
        result.is_valid = True
        return result

    @staticmethod
    def build_cost_sheet(lines, margin_percent=0) -> CostSheet:
        """
        Cost every line and derive the suggested price.

        Invalid lines are kept in the sheet (so the caller can show why) but
        excluded from the total, and the sheet is flagged incomplete.
        """
        results = [CostingService.cost_material(line) for line in lines]
        margin = to_decimal(margin_percent)
        if margin is None:
            margin = Decimal("0")

        total = PricingService.total_material_cost(
            {"cost": result.cost} for result in results if result.is_valid
        )
        price = PricingService.selling_price(total, margin)

        return CostSheet(
            lines=results,
            total_cost=total,
            margin_percent=margin,
            selling_price=price,
            profit=PricingService.profit(price, total),
            is_complete=all(result.is_valid for result in results),
        )

    @staticmethod
    def recipe_material_lines(product, inventory, purchases) -> List[MaterialLine]:
        """
        Build material lines for a product's recipe.

        Args:
            product: ProductData whose recipe lists inventory item ids.
            inventory: Iterable of InventoryItemData.
            purchases: Mapping of inventory item id to a dict with
                ``price``, ``quantity`` and ``unit`` describing the last purchase.

        Recipe quantities are expressed in the inventory item's own unit.
        Dangling references become an "unknown item" line that will cost
        as invalid.
        """
        items_by_id = {item.id: item for item in inventory}
        lines = []

        for recipe_item in product.recipe:
            item = items_by_id.get(recipe_item.inventory_item_id)
            purchase = purchases.get(recipe_item.inventory_item_id, {})
            lines.append(MaterialLine(
                name=item.name if item else UNKNOWN_ITEM_NAME,
                purchase_price=purchase.get("price"),
                purchase_quantity=purchase.get("quantity"),
                purchase_unit=purchase.get("unit") or (item.unit if item else None),
                usage_quantity=recipe_item.quantity,
                usage_unit=item.unit if item else None,
                inventory_item_id=recipe_item.inventory_item_id,
            ))

        return lines
