from django.db import models
from django.utils.translation import gettext_lazy as _

from core_backend.base.models import ScopedModel
from orders.records import OrderData, OrderStatus


class Order(ScopedModel):
    """
    A custom order placed by a customer, tracked until delivery.
    """

    OrderStatus = OrderStatus

    customer_name = models.CharField(max_length=200)
    description = models.TextField(help_text=_("What the customer ordered."))
    deadline = models.DateTimeField(help_text=_("When the order must be ready."))
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
        db_index=True,
    )
    estimated_value = models.DecimalField(max_digits=12, decimal_places=2, default=0)

    class Meta:
        verbose_name = _("Order")
        verbose_name_plural = _("Orders")
        ordering = ["deadline"]
        indexes = [
            models.Index(fields=["owner", "deadline"], name="order_owner_deadline_idx"),
        ]

    def __str__(self):
        return f"{self.customer_name}: {self.get_status_display()} ({self.deadline:%Y-%m-%d})"

    def to_data(self) -> OrderData:
        return OrderData(
            id=str(self.id),
            customer_name=self.customer_name,
            description=self.description,
            deadline=self.deadline,
            status=OrderStatus(self.status),
            estimated_value=self.estimated_value,
        )
