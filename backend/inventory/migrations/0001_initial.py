import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='InventoryItem',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(help_text='Name of the item.', max_length=200)),
                ('category', models.CharField(
                    default='Geral',
                    help_text="Free-text category, e.g. 'Cera', 'Essência', 'Embalagem'.",
                    max_length=100,
                )),
                ('quantity', models.DecimalField(
                    decimal_places=4,
                    default=0,
                    help_text="Quantity on hand, in the item's unit.",
                    max_digits=14,
                )),
                ('unit', models.CharField(
                    default='un',
                    help_text="Unit symbol from the unit registry, e.g. 'kg', 'g', 'ml', 'l', 'un'.",
                    max_length=20,
                )),
                ('min_threshold', models.DecimalField(
                    decimal_places=4,
                    default=0,
                    help_text='Quantity at or below which the item is considered low stock.',
                    max_digits=14,
                )),
                ('owner', models.ForeignKey(
                    help_text='Account that owns this record.',
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='+',
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'verbose_name': 'Inventory Item',
                'verbose_name_plural': 'Inventory Items',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['owner', 'name'], name='inventory_owner_name_idx')],
            },
        ),
    ]
