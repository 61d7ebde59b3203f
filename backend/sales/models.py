from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from core_backend.base.models import ScopedModel
from sales.records import SaleData


class Sale(ScopedModel):
    """
    A completed sale. Created at finalization and never edited afterwards.
    """

    date = models.DateTimeField(default=timezone.now, help_text=_("When the sale happened."))
    customer_name = models.CharField(max_length=200)
    description = models.TextField(
        help_text=_("What was sold, as shown to the user. Not parsed back.")
    )
    total_value = models.DecimalField(max_digits=12, decimal_places=2, default=0)

    class Meta:
        verbose_name = _("Sale")
        verbose_name_plural = _("Sales")
        ordering = ["-date", "-created_at"]
        indexes = [
            models.Index(fields=["owner", "-date"], name="sale_owner_date_idx"),
        ]

    def __str__(self):
        return f"{self.customer_name} - {self.total_value} ({self.date:%Y-%m-%d})"

    def to_data(self) -> SaleData:
        return SaleData(
            id=str(self.id),
            date=self.date,
            customer_name=self.customer_name,
            description=self.description,
            total_value=self.total_value,
        )
