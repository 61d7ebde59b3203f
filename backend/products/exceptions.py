from core_backend.exceptions import DomainError


class DuplicateIngredient(DomainError):
    """This inventory item is already part of the recipe."""

    code = "duplicate_ingredient"

    def __init__(self, inventory_item_id, message=None):
        self.inventory_item_id = inventory_item_id
        if message is None:
            message = f"Inventory item {inventory_item_id} is already part of the recipe."
        super().__init__(message)
