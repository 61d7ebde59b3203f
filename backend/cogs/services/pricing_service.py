"""
Pricing calculator.

A sandbox calculator: zero costs and negative margins are accepted and simply
produce a price at or below cost.
"""
from decimal import Decimal

from core_backend.utils.numbers import to_decimal


class PricingService:

    @staticmethod
    def total_material_cost(items) -> Decimal:
        """Sum of ``cost`` over items given as mappings or objects with a ``cost`` attribute."""
        total = Decimal("0")
        for item in items:
            cost = item["cost"] if isinstance(item, dict) else item.cost
            total += to_decimal(cost) or Decimal("0")
        return total

    @staticmethod
    def selling_price(total_cost, margin_percent) -> Decimal:
        """``total_cost * (1 + margin_percent / 100)``"""
        total_cost = to_decimal(total_cost) or Decimal("0")
        margin_percent = to_decimal(margin_percent) or Decimal("0")
        return total_cost * (1 + margin_percent / 100)

    @staticmethod
    def profit(selling_price, total_cost) -> Decimal:
        selling_price = to_decimal(selling_price) or Decimal("0")
        total_cost = to_decimal(total_cost) or Decimal("0")
        return selling_price - total_cost
