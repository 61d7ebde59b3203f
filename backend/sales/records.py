"""
Immutable sale snapshots.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from core_backend.base.models import new_id


@dataclass(frozen=True)
class SaleData:
    """
    A completed sale.

    ``description`` is display text synthesized from the cart, e.g.
    "2x Vela Lavanda, 1x Pavio - entrega sábado".
    """
    id: str
    date: datetime
    customer_name: str
    description: str
    total_value: Decimal

    @classmethod
    def create(cls, customer_name, description, total_value, date):
        return cls(
            id=new_id(),
            date=date,
            customer_name=customer_name,
            description=description,
            total_value=total_value,
        )
