"""
Measurements app - shared unit definitions.

Units are global reference data: a gram is a gram for every account.
The authoritative conversion factors live in
``measurements.services.registry``; the ``Unit`` table mirrors them so the
front-end and the admin can list what is available.
"""
from django.db import models
from django.utils.translation import gettext_lazy as _


class UnitCategory(models.TextChoices):
    """Physical quantity groups. Conversion only makes sense inside a group."""
    MASS = "mass", _("Mass")
    VOLUME = "volume", _("Volume")
    COUNT = "count", _("Count")


class Unit(models.Model):
    """
    Measurement unit - GLOBAL reference data.

    ``factor_to_base`` converts a quantity in this unit into the group's base
    unit (gram, milliliter or unit). Base units have a factor of exactly 1.

    Examples: gram (g), kilogram (kg), milliliter (ml), liter (l), unit (un)
    """
    code = models.CharField(
        max_length=20,
        unique=True,
        help_text=_("Short code for the unit, e.g., 'g', 'kg', 'ml', 'l', 'un'")
    )
    name = models.CharField(
        max_length=50,
        help_text=_("Full name of the unit, e.g., 'gram', 'kilogram', 'liter'")
    )
    category = models.CharField(
        max_length=20,
        choices=UnitCategory.choices,
        help_text=_("Group of the unit: mass, volume, or count")
    )
    factor_to_base = models.DecimalField(
        max_digits=18,
        decimal_places=9,
        help_text=_("Multiply a quantity in this unit by this factor to get the base unit quantity")
    )

    class Meta:
        verbose_name = _("Unit")
        verbose_name_plural = _("Units")
        ordering = ['category', 'code']
        indexes = [
            models.Index(fields=['category'], name='measurement_category_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.code})"

    @property
    def is_base(self):
        return self.factor_to_base == 1
