from django.db import models
from django.utils.translation import gettext_lazy as _

from core_backend.base.models import ScopedModel
from inventory.records import DEFAULT_CATEGORY, DEFAULT_UNIT, InventoryItemData
from inventory.services import is_low_stock


class InventoryItem(ScopedModel):
    """
    A stocked material or packaging component, e.g. 'Cera de Coco' (kg),
    'Essência Lavanda' (ml), 'Pavio' (un).

    ``quantity`` is expressed in ``unit``. Recipes consume it in the same unit.
    """

    name = models.CharField(max_length=200, help_text=_("Name of the item."))
    category = models.CharField(
        max_length=100,
        default=DEFAULT_CATEGORY,
        help_text=_("Free-text category, e.g. 'Cera', 'Essência', 'Embalagem'."),
    )
    quantity = models.DecimalField(
        max_digits=14,
        decimal_places=4,
        default=0,
        help_text=_("Quantity on hand, in the item's unit."),
    )
    unit = models.CharField(
        max_length=20,
        default=DEFAULT_UNIT,
        help_text=_("Unit symbol from the unit registry, e.g. 'kg', 'g', 'ml', 'l', 'un'."),
    )
    min_threshold = models.DecimalField(
        max_digits=14,
        decimal_places=4,
        default=0,
        help_text=_("Quantity at or below which the item is considered low stock."),
    )

    class Meta:
        verbose_name = _("Inventory Item")
        verbose_name_plural = _("Inventory Items")
        ordering = ["name"]
        indexes = [
            models.Index(fields=["owner", "name"], name="inventory_owner_name_idx"),
        ]

    def __str__(self):
        return f"{self.name}: {self.quantity} {self.unit}"

    @property
    def is_low_stock(self):
        """Returns True if the current quantity is at or below the threshold."""
        return is_low_stock(self)

    def to_data(self) -> InventoryItemData:
        return InventoryItemData(
            id=str(self.id),
            name=self.name,
            category=self.category,
            quantity=self.quantity,
            unit=self.unit,
            min_threshold=self.min_threshold,
        )
