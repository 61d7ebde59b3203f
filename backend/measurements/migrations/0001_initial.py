"""
Initial migration for measurements app.

Creates the Unit model with global units and their conversion factors.
"""
from decimal import Decimal

from django.db import migrations, models


def seed_default_units(apps, schema_editor):
    """
    Seed the default units shared by every account.
    """
    Unit = apps.get_model('measurements', 'Unit')

    default_units = [
        # Mass units
        {"code": "g", "name": "gram", "category": "mass", "factor_to_base": Decimal("1")},
        {"code": "kg", "name": "kilogram", "category": "mass", "factor_to_base": Decimal("1000")},
        {"code": "mg", "name": "milligram", "category": "mass", "factor_to_base": Decimal("0.001")},
        {"code": "oz", "name": "ounce", "category": "mass", "factor_to_base": Decimal("28.349523125")},
        {"code": "lb", "name": "pound", "category": "mass", "factor_to_base": Decimal("453.59237")},

        # Volume units
        {"code": "ml", "name": "milliliter", "category": "volume", "factor_to_base": Decimal("1")},
        {"code": "l", "name": "liter", "category": "volume", "factor_to_base": Decimal("1000")},
        {"code": "fl_oz", "name": "fluid ounce", "category": "volume", "factor_to_base": Decimal("29.5735295625")},
        {"code": "cup", "name": "cup", "category": "volume", "factor_to_base": Decimal("240")},
        {"code": "gal", "name": "gallon", "category": "volume", "factor_to_base": Decimal("3785.411784")},

        # Count units
        {"code": "un", "name": "unit", "category": "count", "factor_to_base": Decimal("1")},
        {"code": "dozen", "name": "dozen", "category": "count", "factor_to_base": Decimal("12")},
    ]

    for unit_data in default_units:
        Unit.objects.get_or_create(
            code=unit_data["code"],
            defaults={
                "name": unit_data["name"],
                "category": unit_data["category"],
                "factor_to_base": unit_data["factor_to_base"],
            }
        )


def reverse_seed(apps, schema_editor):
    """
    Reverse migration - remove seeded units.
    """
    Unit = apps.get_model('measurements', 'Unit')
    Unit.objects.all().delete()


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Unit',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.CharField(
                    help_text="Short code for the unit, e.g., 'g', 'kg', 'ml', 'l', 'un'",
                    max_length=20,
                    unique=True,
                )),
                ('name', models.CharField(
                    help_text="Full name of the unit, e.g., 'gram', 'kilogram', 'liter'",
                    max_length=50,
                )),
                ('category', models.CharField(
                    choices=[
                        ('mass', 'Mass'),
                        ('volume', 'Volume'),
                        ('count', 'Count'),
                    ],
                    help_text='Group of the unit: mass, volume, or count',
                    max_length=20,
                )),
                ('factor_to_base', models.DecimalField(
                    decimal_places=9,
                    help_text='Multiply a quantity in this unit by this factor to get the base unit quantity',
                    max_digits=18,
                )),
            ],
            options={
                'verbose_name': 'Unit',
                'verbose_name_plural': 'Units',
                'ordering': ['category', 'code'],
                'indexes': [
                    models.Index(fields=['category'], name='measurement_category_idx'),
                ],
            },
        ),
        # Seed default units
        migrations.RunPython(seed_default_units, reverse_seed),
    ]
