"""
Immutable order snapshots.
"""
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal

from django.db import models
from django.utils.translation import gettext_lazy as _


class OrderStatus(models.TextChoices):
    PENDING = "PENDING", _("Pendente")
    IN_PROGRESS = "IN_PROGRESS", _("Em Produção")
    COMPLETED = "COMPLETED", _("Concluído")
    DELIVERED = "DELIVERED", _("Entregue")


@dataclass(frozen=True)
class OrderData:
    """A custom order ("encomenda") to be produced by a deadline."""
    id: str
    customer_name: str
    description: str
    deadline: datetime
    status: str = OrderStatus.PENDING
    estimated_value: Decimal = Decimal("0")

    def with_status(self, status) -> "OrderData":
        return replace(self, status=OrderStatus(status))
