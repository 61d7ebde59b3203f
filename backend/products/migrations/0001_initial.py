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
            name='Product',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(help_text='Name of the product.', max_length=200)),
                ('description', models.TextField(blank=True, help_text='Detailed description of the product.')),
                ('price', models.DecimalField(
                    decimal_places=2,
                    help_text='The selling price of the product.',
                    max_digits=10,
                )),
                ('owner', models.ForeignKey(
                    help_text='Account that owns this record.',
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='+',
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'verbose_name': 'Product',
                'verbose_name_plural': 'Products',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['owner', 'name'], name='product_owner_name_idx')],
            },
        ),
        migrations.CreateModel(
            name='ProductRecipeItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('inventory_item_id', models.UUIDField(help_text='Inventory item consumed by this line.')),
                ('quantity', models.DecimalField(
                    decimal_places=4,
                    help_text="Quantity consumed per unit sold, in the inventory item's unit.",
                    max_digits=12,
                )),
                ('position', models.PositiveIntegerField(default=0, help_text='Display order within the recipe.')),
                ('product', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='recipe_items',
                    to='products.product',
                )),
            ],
            options={
                'verbose_name': 'Recipe Item',
                'verbose_name_plural': 'Recipe Items',
                'ordering': ['position'],
                'constraints': [
                    models.UniqueConstraint(fields=('product', 'inventory_item_id'), name='unique_recipe_ingredient'),
                ],
            },
        ),
    ]
