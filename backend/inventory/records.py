"""
Immutable inventory snapshots used by the domain services.
"""
from dataclasses import dataclass, replace
from decimal import Decimal

from core_backend.base.models import new_id

DEFAULT_CATEGORY = "Geral"
DEFAULT_UNIT = "un"


@dataclass(frozen=True)
class InventoryItemData:
    """A stocked material or packaging component."""
    id: str
    name: str
    category: str
    quantity: Decimal
    unit: str
    min_threshold: Decimal = Decimal("0")

    @property
    def is_low_stock(self) -> bool:
        from inventory.services import is_low_stock
        return is_low_stock(self)

    def with_quantity(self, quantity: Decimal) -> "InventoryItemData":
        return replace(self, quantity=quantity)

    @classmethod
    def create(cls, name, quantity, unit=DEFAULT_UNIT, category=DEFAULT_CATEGORY, min_threshold=Decimal("0")):
        return cls(
            id=new_id(),
            name=name,
            category=category or DEFAULT_CATEGORY,
            quantity=Decimal(str(quantity)),
            unit=unit or DEFAULT_UNIT,
            min_threshold=Decimal(str(min_threshold or 0)),
        )
