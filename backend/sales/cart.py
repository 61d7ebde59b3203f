"""
Transient sale cart.

A cart is a tuple of entries built while the sale is composed. It is never
persisted: finalizing the sale turns it into a Sale description and a set of
stock deductions, abandoning the sale simply drops the tuple.
"""
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Optional, Tuple

from django.db import models
from django.utils.translation import gettext_lazy as _

from core_backend.exceptions import InvalidQuantity
from core_backend.utils.numbers import to_positive_decimal, to_decimal

DEFAULT_SALE_DESCRIPTION = "Venda Diversa"

# Largest values the stock and sale columns can hold
MAX_QUANTITY = Decimal("9999999999.9999")
MAX_UNIT_PRICE = Decimal("9999999999.99")


class CartEntryKind(models.TextChoices):
    PRODUCT = "product", _("Product")
    INVENTORY_ITEM = "inventory_item", _("Inventory item")


@dataclass(frozen=True)
class CartEntry:
    """
    A product or a raw inventory item being sold.

    ``unit_price`` is captured when the entry is added (products default to
    their catalogue price at finalization time).
    """
    kind: str
    reference_id: str
    quantity: Decimal
    unit_price: Optional[Decimal] = None
    name: str = ""

    @property
    def line_total(self) -> Decimal:
        return (self.unit_price or Decimal("0")) * self.quantity

    @classmethod
    def create(cls, kind, reference_id, quantity, unit_price=None, name=""):
        """
        Validate and build an entry.

        Raises:
            InvalidQuantity: quantity is missing, zero, negative, not a
                number or larger than MAX_QUANTITY, or unit_price is negative,
                not a number or larger than MAX_UNIT_PRICE.
        """
        amount = to_positive_decimal(quantity)
        if amount is None or amount > MAX_QUANTITY:
            raise InvalidQuantity(quantity)

        price = None
        if unit_price is not None and unit_price != "":
            price = to_decimal(unit_price)
            if price is None or price < 0 or price > MAX_UNIT_PRICE:
                raise InvalidQuantity(unit_price, field="unit_price")

        return cls(
            kind=CartEntryKind(kind),
            reference_id=str(reference_id),
            quantity=amount,
            unit_price=price,
            name=name or "",
        )


Cart = Tuple[CartEntry, ...]


def add_to_cart(cart: Cart, entry: CartEntry) -> Cart:
    """
    Add an entry. An entry for the same product/item at the same unit price
    increases its quantity; a different captured price keeps its own line.
    """
    if entry.quantity <= 0:
        raise InvalidQuantity(entry.quantity)

    for index, existing in enumerate(cart):
        if (
            existing.kind == entry.kind
            and existing.reference_id == entry.reference_id
            and existing.unit_price == entry.unit_price
        ):
            quantity = existing.quantity + entry.quantity
            if quantity > MAX_QUANTITY:
                raise InvalidQuantity(quantity)
            merged = replace(existing, quantity=quantity)
            return cart[:index] + (merged,) + cart[index + 1:]

    return tuple(cart) + (entry,)


def cart_total(cart: Cart) -> Decimal:
    return sum((entry.line_total for entry in cart), Decimal("0"))


def format_quantity(quantity: Decimal) -> str:
    """2 -> '2', 2.50 -> '2.5'"""
    return format(quantity.normalize(), "f")


def describe_cart(cart: Cart, notes: str = "") -> str:
    """
    Human-readable description stored on the sale, e.g.
    "2x Vela Lavanda, 1x Pavio - entrega sábado".

    Write-once display text; nothing parses it back.
    """
    parts = [f"{format_quantity(entry.quantity)}x {entry.name or entry.reference_id}" for entry in cart]
    description = ", ".join(parts)
    notes = (notes or "").strip()

    if description and notes:
        return f"{description} - {notes}"
    return description or notes or DEFAULT_SALE_DESCRIPTION
