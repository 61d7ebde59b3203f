"""
Production mix calculator.

Splits the total fill weight of a batch of candles into wax and fragrance,
with the fragrance load expressed as a percentage of the wax weight:

    total     = container_size * quantity
    wax       = total / (1 + fragrance_percent / 100)
    fragrance = total - wax
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from core_backend.exceptions import InvalidQuantity
from core_backend.utils.numbers import to_decimal, to_positive_decimal

ONE_PLACE = Decimal("0.1")


@dataclass(frozen=True)
class ProductionMix:
    total_mix: Decimal
    wax_amount: Decimal
    fragrance_amount: Decimal

    def rounded(self) -> "ProductionMix":
        """Values rounded to one decimal place, as shown to the user."""
        return ProductionMix(
            total_mix=self.total_mix.quantize(ONE_PLACE, rounding=ROUND_HALF_UP),
            wax_amount=self.wax_amount.quantize(ONE_PLACE, rounding=ROUND_HALF_UP),
            fragrance_amount=self.fragrance_amount.quantize(ONE_PLACE, rounding=ROUND_HALF_UP),
        )


def compute_production_mix(container_size, fragrance_percent, quantity=1) -> ProductionMix:
    """
    Compute wax and fragrance (in grams) for ``quantity`` containers of
    ``container_size`` grams.

    Raises:
        InvalidQuantity: container size or quantity is not positive, or the
            fragrance load is negative / not a number.
    """
    size = to_positive_decimal(container_size)
    if size is None:
        raise InvalidQuantity(container_size, field="container_size")

    count = to_positive_decimal(quantity)
    if count is None:
        raise InvalidQuantity(quantity, field="quantity")

    load = to_decimal(fragrance_percent)
    if load is None or load < 0:
        raise InvalidQuantity(fragrance_percent, field="fragrance_percent")

    total = size * count
    wax = total / (1 + load / 100)
    return ProductionMix(total_mix=total, wax_amount=wax, fragrance_amount=total - wax)
