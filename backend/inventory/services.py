"""
Inventory domain services.

Every operation here takes an inventory snapshot (a sequence of
InventoryItemData) and returns a new one; nothing is saved. Callers hand the
result to InventoryRepository.save_all.
"""
import logging
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from core_backend.exceptions import DanglingReference, InvalidQuantity
from core_backend.utils.numbers import to_decimal
from inventory.records import InventoryItemData
from measurements.services.registry import lookup
from sales.cart import CartEntryKind

logger = logging.getLogger(__name__)


def is_low_stock(item) -> bool:
    """Low stock when quantity is at or below the threshold (inclusive)."""
    return item.quantity <= item.min_threshold


@dataclass(frozen=True)
class StockMovement:
    """One applied deduction."""
    inventory_item_id: str
    requested: Decimal
    deducted: Decimal
    previous_quantity: Decimal
    new_quantity: Decimal
    reason: str = ""

    @property
    def was_clamped(self) -> bool:
        return self.deducted < self.requested


@dataclass
class DeductionReport:
    """Outcome of deducting a sale from an inventory snapshot."""
    inventory: Tuple[InventoryItemData, ...]
    movements: List[StockMovement] = field(default_factory=list)
    skipped: List[DanglingReference] = field(default_factory=list)

    @property
    def clamped(self) -> List[StockMovement]:
        return [movement for movement in self.movements if movement.was_clamped]


class InventoryService:

    @staticmethod
    def low_stock_items(items: Sequence[InventoryItemData]) -> List[InventoryItemData]:
        return [item for item in items if is_low_stock(item)]

    @staticmethod
    def find_item(items: Sequence[InventoryItemData], item_id) -> Optional[InventoryItemData]:
        item_id = str(item_id)
        for item in items:
            if item.id == item_id:
                return item
        return None

    @staticmethod
    def find_merge_target(items: Sequence[InventoryItemData], name: str, category: str) -> Optional[InventoryItemData]:
        """
        An existing item is the "same" item when the name matches ignoring
        case and the category matches exactly.
        """
        wanted = (name or "").strip().casefold()
        for item in items:
            if item.name.strip().casefold() == wanted and item.category == category:
                return item
        return None

    @staticmethod
    def add_or_merge(items: Sequence[InventoryItemData], new_item: InventoryItemData):
        """
        Add ``new_item`` to the snapshot, or increase the quantity of the
        matching existing item instead of creating a duplicate.

        Returns:
            Tuple of (new snapshot, resulting item, merged flag).

        The added quantity is converted into the existing item's unit when
        both units belong to the same group.

        Raises:
            InvalidQuantity: the new quantity is negative or not a number, or
                its unit cannot be converted into the existing item's unit.
        """
        quantity = to_decimal(new_item.quantity)
        if quantity is None or quantity < 0:
            raise InvalidQuantity(new_item.quantity)

        items = tuple(items)
        target = InventoryService.find_merge_target(items, new_item.name, new_item.category)

        if target is None:
            added = replace(new_item, quantity=quantity)
            return items + (added,), added, False

        added = InventoryService.convert_for_merge(quantity, new_item.unit, target.unit)
        merged = target.with_quantity(target.quantity + added)
        logger.info(
            f"Merged {quantity} {new_item.unit} into existing item '{target.name}' "
            f"({target.quantity} -> {merged.quantity})"
        )
        updated = tuple(merged if item.id == target.id else item for item in items)
        return updated, merged, True

    @staticmethod
    def convert_for_merge(quantity: Decimal, from_unit: str, to_unit: str) -> Decimal:
        """
        Express ``quantity`` (in ``from_unit``) in ``to_unit``.

        Raises:
            InvalidQuantity: the units are unknown or belong to different groups.
        """
        source, target = lookup(from_unit), lookup(to_unit)
        if source is None or target is None:
            if (from_unit or "").strip().lower() == (to_unit or "").strip().lower():
                return quantity
            raise InvalidQuantity(
                from_unit, field="unit",
                message=f"Cannot add '{from_unit}' to an item stocked in '{to_unit}'.",
            )

        if source.code == target.code:
            return quantity
        if source.group != target.group:
            raise InvalidQuantity(
                from_unit, field="unit",
                message=f"Cannot add {source.group} ('{source.code}') to an item stocked in "
                        f"{target.group} ('{target.code}').",
            )
        return target.from_base(source.to_base(quantity))

    @staticmethod
    def remove_item(items: Sequence[InventoryItemData], item_id) -> Tuple[InventoryItemData, ...]:
        item_id = str(item_id)
        return tuple(item for item in items if item.id != item_id)

    @staticmethod
    def apply_deduction(items, item_id, amount, reason=""):
        """
        Decrement one item, clamping at zero.

        Returns:
            Tuple of (new snapshot, StockMovement) or (unchanged snapshot, None)
            when the item does not exist.
        """
        items = tuple(items)
        item = InventoryService.find_item(items, item_id)
        if item is None:
            return items, None

        new_quantity = max(Decimal("0"), item.quantity - amount)
        movement = StockMovement(
            inventory_item_id=item.id,
            requested=amount,
            deducted=item.quantity - new_quantity,
            previous_quantity=item.quantity,
            new_quantity=new_quantity,
            reason=reason,
        )
        updated = tuple(
            existing.with_quantity(new_quantity) if existing.id == item.id else existing
            for existing in items
        )
        return updated, movement

    @staticmethod
    def deduct_for_sale(inventory, products, entries) -> DeductionReport:
        """
        Deduct a finalized sale's cart from an inventory snapshot.

        Entries are processed in cart order:
        - inventory item entries decrement that item by the entry quantity;
        - product entries decrement every recipe item by
          ``recipe quantity * units sold``.

        Quantities never go below zero. Missing products or inventory items
        are skipped without error and listed in ``report.skipped``.
        """
        report = DeductionReport(inventory=tuple(inventory))
        products_by_id = {product.id: product for product in products}

        for entry in entries:
            if entry.kind == CartEntryKind.INVENTORY_ITEM:
                InventoryService._deduct_into(
                    report,
                    entry.reference_id,
                    entry.quantity,
                    reason=f"Venda direta ({entry.quantity})",
                )
                continue

            product = products_by_id.get(entry.reference_id)
            if product is None:
                logger.debug(f"Skipping deduction for missing product {entry.reference_id}")
                report.skipped.append(DanglingReference("product", entry.reference_id))
                continue

            for recipe_item in product.recipe:
                InventoryService._deduct_into(
                    report,
                    recipe_item.inventory_item_id,
                    recipe_item.quantity * entry.quantity,
                    reason=f"Receita de {product.name}",
                    context=product.id,
                )

        logger.info(
            f"Sale deduction: {len(report.movements)} movements, "
            f"{len(report.skipped)} skipped references, {len(report.clamped)} clamped at zero"
        )
        return report

    @staticmethod
    def _deduct_into(report, item_id, amount, reason="", context=""):
        inventory, movement = InventoryService.apply_deduction(report.inventory, item_id, amount, reason)
        if movement is None:
            logger.debug(f"Skipping deduction for missing inventory item {item_id}")
            report.skipped.append(DanglingReference("inventory_item", str(item_id), context))
            return

        report.inventory = inventory
        report.movements.append(movement)
