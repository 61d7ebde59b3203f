from core_backend.repositories import ScopedRepository
from inventory.models import InventoryItem


class InventoryRepository(ScopedRepository):
    model = InventoryItem
    collection = "inventory"
    ordering = ("name",)

    def to_snapshot(self, row):
        return row.to_data()

    def to_fields(self, snapshot):
        return {
            "name": snapshot.name,
            "category": snapshot.category,
            "quantity": snapshot.quantity,
            "unit": snapshot.unit,
            "min_threshold": snapshot.min_threshold,
        }
